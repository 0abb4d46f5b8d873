"""
Content interpretation by file extension.
"""

from .results import (
    ResultKind,
    DispatchResult,
    StructuredValue,
    Text,
    SubDocument,
    RawBytes,
)

from .protocols import (
    ExpressionEvaluator,
    ScriptNormalizer,
    Document,
    DocumentParser,
    StructuredDataCodec,
)

from .evaluator import ScriptFunction, fix_function_literal, DefaultEvaluator, DefaultScriptNormalizer

from .data_codec import DefaultCodec

from .feature import Feature, Scenario, Step, FeatureParser, FeatureParseError, parse_tags

from .dispatcher import ContentDispatcher, DispatchRule, DEFAULT_RULES, CATCH_ALL


__all__ = [
    # Results
    "ResultKind",
    "DispatchResult",
    "StructuredValue",
    "Text",
    "SubDocument",
    "RawBytes",

    # Collaborator interfaces
    "ExpressionEvaluator",
    "ScriptNormalizer",
    "Document",
    "DocumentParser",
    "StructuredDataCodec",

    # Default collaborators
    "ScriptFunction",
    "fix_function_literal",
    "DefaultEvaluator",
    "DefaultScriptNormalizer",
    "DefaultCodec",
    "Feature",
    "Scenario",
    "Step",
    "FeatureParser",
    "FeatureParseError",
    "parse_tags",

    # Dispatcher
    "ContentDispatcher",
    "DispatchRule",
    "DEFAULT_RULES",
    "CATCH_ALL",
]
