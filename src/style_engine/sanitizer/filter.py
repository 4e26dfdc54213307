"""CSS declaration sanitizer for untrusted block style values."""

from __future__ import annotations

import logging
import re

from style_engine.errors import DeclarationError
from style_engine.sanitizer.parser import Declaration, parse_declaration
from style_engine.sanitizer.policy import SanitizerPolicy

__all__ = ["CSSSanitizer"]

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^\s*([A-Za-z][A-Za-z0-9+.-]*):")


class CSSSanitizer:
    """Accept or reject CSS declarations against a :class:`SanitizerPolicy`.

    ``filter()`` checks exactly one declaration and returns its normalized
    text, or an empty string when it is rejected. It never raises.
    """

    def __init__(self, policy: SanitizerPolicy | None = None) -> None:
        self.policy = policy or SanitizerPolicy()

    def filter(self, declaration: str) -> str:
        """Return ``"property: value"`` if *declaration* is safe, else ``""``."""
        parsed, reason = self._check(declaration)
        if parsed is None:
            logger.debug("Rejected CSS declaration %r: %s", declaration, reason)
            return ""
        return str(parsed)

    def filter_attr(self, css: str) -> str:
        """Filter a full style attribute, dropping each unsafe declaration."""
        accepted = []
        for item in css.split(";"):
            if not item.strip():
                continue
            filtered = self.filter(item)
            if filtered:
                accepted.append(filtered)
        return "; ".join(accepted)

    def explain(self, declaration: str) -> str | None:
        """Return why *declaration* would be rejected, or None if it is safe."""
        return self._check(declaration)[1]

    # ------------------------------------------------------------------

    def _check(self, declaration: str) -> tuple[Declaration | None, str | None]:
        if "/*" in declaration:
            return None, "comments are not allowed"
        try:
            parsed = parse_declaration(declaration)
        except DeclarationError as exc:
            return None, f"invalid syntax at column {exc.column}"

        policy = self.policy
        if not policy.allows_property(parsed.property):
            return None, f"property '{parsed.property}' is not allowed"

        for name in parsed.functions:
            if name in policy.gradient_functions:
                if parsed.property not in policy.gradient_properties:
                    return None, f"gradient '{name}()' is not allowed in '{parsed.property}'"
            elif name not in policy.allowed_functions:
                return None, f"function '{name}()' is not allowed"

        for url in parsed.urls:
            if parsed.property not in policy.url_properties:
                return None, f"url() is not allowed in '{parsed.property}'"
            match = _SCHEME_RE.match(url)
            if match and match.group(1).lower() not in policy.allowed_protocols:
                return None, f"url scheme '{match.group(1)}' is not allowed"

        return parsed, None
