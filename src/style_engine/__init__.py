"""Style engine: compiles block style attributes into CSS and class names."""
from __future__ import annotations

__version__ = "0.1.0"

from style_engine.engine import StyleEngine, generate, get_style_engine
from style_engine.model import (
    CompilationResult,
    GenerateOptions,
    RuleKind,
    StyleDefinition,
    StyleSchema,
)
from style_engine.sanitizer import CSSSanitizer, SanitizerPolicy
from style_engine.schema import BLOCK_STYLE_DEFINITIONS

__all__ = [
    "__version__",
    "BLOCK_STYLE_DEFINITIONS",
    "CSSSanitizer",
    "CompilationResult",
    "GenerateOptions",
    "RuleKind",
    "SanitizerPolicy",
    "StyleDefinition",
    "StyleEngine",
    "StyleSchema",
    "generate",
    "get_style_engine",
]
