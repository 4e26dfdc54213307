"""Placeholder substitution and kebab-case conversion helpers."""

from __future__ import annotations

import re

__all__ = ["substitute", "to_kebab_case"]

# Runs of letters and digits; underscores and punctuation separate words.
_CHUNK_RE = re.compile(r"[^\W_]+")


def _is_boundary(prev: str, char: str, following: str) -> bool:
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # Acronym followed by a capitalised word: "HTMLParser" -> "HTML", "Parser".
    return prev.isupper() and char.isupper() and following.islower()


def _split_words(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        following = chunk[index + 1] if index + 1 < len(chunk) else ""
        if _is_boundary(chunk[index - 1], chunk[index], following):
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words


def substitute(template: str, **values: str) -> str:
    """Replace ``$name`` placeholders in *template* with *values*.

    Longer names are substituted first so ``$slug`` never clobbers ``$slugs``.
    Placeholders without a value are left untouched.
    """
    result = template
    for name in sorted(values, key=len, reverse=True):
        result = result.replace(f"${name}", values[name])
    return result


def to_kebab_case(value: str) -> str:
    """Convert *value* to kebab-case, e.g. ``heavenlyBlue`` -> ``heavenly-blue``.

    Letter classes are Unicode-aware, so ``crème-brûlée`` is kept intact.
    """
    words = [
        word
        for chunk in _CHUNK_RE.findall(value.replace("'", ""))
        for word in _split_words(chunk)
    ]
    return "-".join(word.lower() for word in words)
