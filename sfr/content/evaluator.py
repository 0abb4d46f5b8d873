"""
Default expression evaluator and script normalizer.

JSON becomes plain Python data, XML an ElementTree element, and script
sources are kept as ScriptFunction values for a host engine to run.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any
from xml.etree import ElementTree

# Named declaration 'function name(' -> anonymous 'function('
_NAMED_FUNCTION = re.compile(r"^function(?:\s+[A-Za-z_$][\w$]*)?\s*\(")

# 'function(' or an arrow function '(a, b) =>' / 'a =>'
_SCRIPT_FUNCTION = re.compile(r"^(function\s*\(|\([^)]*\)\s*=>|[A-Za-z_$][\w$]*\s*=>)")

# Leading '// ...' and '/* ... */' comments (and the whitespace around them)
_LEADING_COMMENTS = re.compile(r"\A(?:\s*(?://[^\n]*(?:\n|\Z)|/\*.*?\*/))*\s*", re.DOTALL)


def strip_leading_comments(text: str) -> str:
    return _LEADING_COMMENTS.sub("", text, count=1).strip()


@dataclass(frozen=True)
class ScriptFunction:
    """Script function source, evaluated lazily by the host engine."""
    source: str

    def __str__(self) -> str:
        return self.source


def fix_function_literal(text: str) -> str:
    """Turn a named function declaration into an anonymous function expression."""
    text = strip_leading_comments(text)
    return _NAMED_FUNCTION.sub("function(", text, count=1)


class DefaultScriptNormalizer:
    def fix_function_literal(self, text: str) -> str:
        return fix_function_literal(text)


class DefaultEvaluator:
    """
    Minimal evaluator for embedded content.

    Errors of the underlying parsers (json.JSONDecodeError,
    ElementTree.ParseError) propagate unchanged.
    """

    def evaluate(self, text: str) -> Any:
        s = text.strip()
        if not s.startswith("<"):
            s = strip_leading_comments(s)
        if not s:
            return None
        if s.startswith("<"):
            return ElementTree.fromstring(s)
        if _SCRIPT_FUNCTION.match(s):
            return ScriptFunction(s)
        return json.loads(s)


__all__ = [
    "ScriptFunction",
    "fix_function_literal",
    "strip_leading_comments",
    "DefaultScriptNormalizer",
    "DefaultEvaluator",
]
