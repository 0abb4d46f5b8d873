"""
Content dispatcher: interprets a resolved resource by its file extension.

The table is an ordered tuple of rules ending in a raw-bytes catch-all.
Related suffixes (.yaml/.yml, .graphql/.gql) live in one rule so they
cannot drift apart.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..addressing.types import ParsedLocator, ResourceHandle
from ..streams.reader import StreamReader
from .data_codec import DefaultCodec
from .evaluator import DefaultEvaluator, DefaultScriptNormalizer
from .feature import FeatureParser
from .protocols import DocumentParser, ExpressionEvaluator, ScriptNormalizer, StructuredDataCodec
from .results import DispatchResult, RawBytes, StructuredValue, SubDocument, Text

_LOG = logging.getLogger(__name__)

Handler = Callable[["ContentDispatcher", ParsedLocator, ResourceHandle], DispatchResult]


@dataclass(frozen=True)
class DispatchRule:
    name: str
    suffixes: Tuple[str, ...]
    handler: Handler

    def matches(self, path: str) -> bool:
        # Case-sensitive suffix match; an empty suffix tuple never matches
        return bool(self.suffixes) and path.endswith(self.suffixes)


# -------------------- Handlers --------------------

def _evaluate(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    text = d.streams.read_string(handle)
    return StructuredValue(d.evaluator.evaluate(text))


def _evaluate_script(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    text = d.streams.read_string(handle)
    text = d.normalizer.fix_function_literal(text)
    return StructuredValue(d.evaluator.evaluate(text))


def _text(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    return Text(d.streams.read_string(handle))


def _feature(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    document = d.document_parser.parse(handle)
    document.set_tag_filter(parsed.tag_filter)
    return SubDocument(document)


def _csv(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    return StructuredValue(d.codec.from_csv(d.streams.read_string(handle)))


def _yaml(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    return StructuredValue(d.codec.from_yaml(d.streams.read_string(handle)))


def _raw_bytes(d: "ContentDispatcher", parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
    return RawBytes(d.streams.read_bytes(handle))


DEFAULT_RULES: Tuple[DispatchRule, ...] = (
    DispatchRule("expression", (".json", ".xml"), _evaluate),
    DispatchRule("script", (".js",), _evaluate_script),
    DispatchRule("text", (".txt", ".graphql", ".gql"), _text),
    DispatchRule("feature", (".feature",), _feature),
    DispatchRule("csv", (".csv",), _csv),
    DispatchRule("yaml", (".yaml", ".yml"), _yaml),
)

CATCH_ALL = DispatchRule("raw", (), _raw_bytes)


class ContentDispatcher:
    """
    Selects a handling strategy by suffix and returns a typed result.

    Errors raised by collaborators (evaluator, codec, document parser)
    propagate unchanged.
    """

    def __init__(
        self,
        streams: StreamReader,
        evaluator: Optional[ExpressionEvaluator] = None,
        normalizer: Optional[ScriptNormalizer] = None,
        document_parser: Optional[DocumentParser] = None,
        codec: Optional[StructuredDataCodec] = None,
        rules: Sequence[DispatchRule] = DEFAULT_RULES,
        logger: Optional[logging.Logger] = None,
    ):
        self.streams = streams
        self.evaluator = evaluator or DefaultEvaluator()
        self.normalizer = normalizer or DefaultScriptNormalizer()
        self.document_parser = document_parser or FeatureParser(streams, encoding=streams.encoding)
        self.codec = codec or DefaultCodec()
        self._rules: List[DispatchRule] = list(rules)
        self.log = logger or _LOG

    @property
    def rules(self) -> Tuple[DispatchRule, ...]:
        """Rules in evaluation order, catch-all last."""
        return tuple(self._rules) + (CATCH_ALL,)

    def register(self, name: str, suffixes: Sequence[str], handler: Handler) -> DispatchRule:
        """
        Add a rule just before the catch-all.

        Raises:
            ValueError: A suffix would be shadowed by an earlier rule
        """
        suffixes = tuple(suffixes)
        if not suffixes:
            raise ValueError(f"Rule '{name}' needs at least one suffix")
        for suffix in suffixes:
            for rule in self._rules:
                shadowing = [s for s in rule.suffixes if suffix.endswith(s)]
                if shadowing:
                    raise ValueError(
                        f"Suffix '{suffix}' of rule '{name}' is already handled "
                        f"by rule '{rule.name}' ({shadowing[0]})"
                    )
        rule = DispatchRule(name, suffixes, handler)
        self._rules.append(rule)
        return rule

    def select(self, path: str) -> DispatchRule:
        for rule in self._rules:
            if rule.matches(path):
                return rule
        return CATCH_ALL

    def dispatch(self, parsed: ParsedLocator, handle: ResourceHandle) -> DispatchResult:
        rule = self.select(parsed.path)
        self.log.debug("dispatching %s as %s", parsed.path, rule.name)
        return rule.handler(self, parsed, handle)


__all__ = ["ContentDispatcher", "DispatchRule", "DEFAULT_RULES", "CATCH_ALL", "Handler"]
