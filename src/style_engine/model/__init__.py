"""Style engine model layer -- public type re-exports."""

from style_engine.model.definition import RuleKind, StyleDefinition, StyleSchema
from style_engine.model.diagnostic import Diagnostic, Severity
from style_engine.model.result import CompilationResult, GenerateOptions

__all__ = [
    # definition
    "RuleKind",
    "StyleDefinition",
    "StyleSchema",
    # result
    "CompilationResult",
    "GenerateOptions",
    # diagnostic
    "Severity",
    "Diagnostic",
]
