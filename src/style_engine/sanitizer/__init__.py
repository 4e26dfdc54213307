from style_engine.sanitizer.filter import CSSSanitizer
from style_engine.sanitizer.parser import Declaration, parse_declaration
from style_engine.sanitizer.policy import SanitizerPolicy

__all__ = ["CSSSanitizer", "Declaration", "SanitizerPolicy", "parse_declaration"]
