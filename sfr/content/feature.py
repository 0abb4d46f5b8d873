"""
Feature documents: a small Gherkin subset parser.

Recognizes tags, Feature/Background/Scenario/Scenario Outline/Examples
headers, steps, doc strings and table rows. Enough to select scenarios
by tag; execution is up to the host runtime.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..addressing.types import ResourceHandle
from ..errors import SFRUserError

if TYPE_CHECKING:
    from ..streams.reader import StreamReader

_TAG = re.compile(r"@[^\s@]+")

STEP_KEYWORDS = ("Given", "When", "Then", "And", "But", "*")
_DOC_STRING = '"""'


class FeatureParseError(SFRUserError):
    def __init__(self, message: str, source: str, line: Optional[int] = None):
        self.source = source
        self.line = line
        where = f"{source}:{line}" if line is not None else source
        super().__init__(f"{message} ({where})")


def parse_tags(text: Optional[str]) -> List[str]:
    """Extract '@tag' tokens from a tag line or a tag filter."""
    if not text:
        return []
    return _TAG.findall(text)


@dataclass
class Step:
    keyword: str
    text: str
    line: int
    doc_string: Optional[str] = None
    table: List[List[str]] = field(default_factory=list)


@dataclass
class Scenario:
    name: str
    line: int
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    outline: bool = False
    examples: List[List[str]] = field(default_factory=list)
    examples_tags: List[str] = field(default_factory=list)

    @property
    def effective_tags(self) -> List[str]:
        """Scenario tags plus the tags of its Examples blocks."""
        return self.tags + [t for t in self.examples_tags if t not in self.tags]


@dataclass
class Feature:
    name: str
    tags: List[str] = field(default_factory=list)
    description: str = ""
    background: List[Step] = field(default_factory=list)
    scenarios: List[Scenario] = field(default_factory=list)
    resource: Optional[ResourceHandle] = None
    call_tag: Optional[str] = None

    def set_tag_filter(self, tag: Optional[str]) -> None:
        self.call_tag = tag

    def selected_scenarios(self) -> List[Scenario]:
        """
        Scenarios matching the call tag.

        A scenario matches when any filter tag is among the feature's tags,
        the scenario's own tags or the tags of its Examples blocks.
        No filter selects everything.
        """
        wanted = set(parse_tags(self.call_tag))
        if not wanted:
            return list(self.scenarios)
        feature_tags = set(self.tags)
        return [s for s in self.scenarios if wanted & (feature_tags | set(s.effective_tags))]


def _split_row(line: str) -> List[str]:
    return [cell.strip() for cell in line.strip().strip("|").split("|")]


class FeatureParser:
    """
    Default DocumentParser.

    Reads through the StreamReader when one is given, so missing features
    fail with the same NotFoundError as every other read.
    """

    def __init__(self, streams: Optional["StreamReader"] = None, encoding: str = "utf-8"):
        self.streams = streams
        self.encoding = encoding

    def parse(self, handle: ResourceHandle) -> Feature:
        if self.streams is not None:
            text = self.streams.read_string(handle)
        else:
            with handle.open_stream() as stream:
                text = stream.read().decode(self.encoding)
        feature = self.parse_text(text, source=handle.raw)
        feature.resource = handle
        return feature

    def parse_text(self, text: str, source: str = "<string>") -> Feature:
        feature: Optional[Feature] = None
        pending_tags: List[str] = []
        description: List[str] = []
        steps: Optional[List[Step]] = None
        scenario: Optional[Scenario] = None
        in_examples = False
        doc_lines: Optional[List[str]] = None

        for lineno, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()

            if doc_lines is not None:
                if line.startswith(_DOC_STRING):
                    steps[-1].doc_string = "\n".join(doc_lines)
                    doc_lines = None
                else:
                    doc_lines.append(line)
                continue

            if not line or line.startswith("#"):
                continue

            if line.startswith("@"):
                pending_tags.extend(parse_tags(line))
                continue

            if line.startswith("Feature:"):
                if feature is not None:
                    raise FeatureParseError("Duplicate 'Feature:'", source, lineno)
                feature = Feature(name=line[len("Feature:"):].strip(), tags=pending_tags)
                pending_tags = []
                continue

            if feature is None:
                raise FeatureParseError("Expected 'Feature:'", source, lineno)

            if line.startswith("Background:"):
                steps, scenario, in_examples = feature.background, None, False
                continue

            if line.startswith("Scenario Outline:") or line.startswith("Scenario:"):
                outline = line.startswith("Scenario Outline:")
                name = line.split(":", 1)[1].strip()
                scenario = Scenario(name=name, line=lineno, tags=pending_tags, outline=outline)
                pending_tags = []
                feature.scenarios.append(scenario)
                steps, in_examples = scenario.steps, False
                continue

            if line.startswith("Examples:"):
                if scenario is None:
                    raise FeatureParseError("'Examples:' outside a scenario", source, lineno)
                scenario.examples_tags.extend(pending_tags)
                pending_tags = []
                in_examples = True
                continue

            if line.startswith("|"):
                if in_examples:
                    scenario.examples.append(_split_row(line))
                elif steps:
                    steps[-1].table.append(_split_row(line))
                else:
                    raise FeatureParseError("Table row without a step", source, lineno)
                continue

            if line.startswith(_DOC_STRING):
                if not steps:
                    raise FeatureParseError("Doc string without a step", source, lineno)
                doc_lines = []
                continue

            keyword = line.split(None, 1)[0]
            if steps is not None and keyword in STEP_KEYWORDS:
                rest = line[len(keyword):].strip()
                steps.append(Step(keyword=keyword, text=rest, line=lineno))
                continue

            if steps is None:
                description.append(line)
                continue

            raise FeatureParseError(f"Unexpected line '{line}'", source, lineno)

        if feature is None:
            raise FeatureParseError("Expected 'Feature:'", source)
        if doc_lines is not None:
            raise FeatureParseError("Unterminated doc string", source)
        feature.description = "\n".join(description)
        return feature


__all__ = [
    "Feature",
    "Scenario",
    "Step",
    "FeatureParser",
    "FeatureParseError",
    "parse_tags",
]
