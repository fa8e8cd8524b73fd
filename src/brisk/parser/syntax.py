"""Small helpers for the utility-token micro-syntax.

These operate on raw strings and know nothing about registered variants; the
:class:`~brisk.parser.parser.Parser` uses them as building blocks.
"""

from __future__ import annotations

import re

__all__ = [
    "split_outside_brackets",
    "find_closing_bracket",
    "has_variants",
    "is_negative",
    "has_arbitrary",
    "extract_utility",
    "extract_variants",
    "combine_with_variants",
    "normalize_arbitrary_value",
    "parse_arbitrary_value",
    "create_class_name",
]

_ARBITRARY_RE = re.compile(r"\[[^\]]+\]")
_TYPED_ARBITRARY_RE = re.compile(r"^\[(?:([a-z-]+):)?(.+)\]$", re.IGNORECASE)
_UNESCAPED_UNDERSCORE_RE = re.compile(r"(?<!\\)_")


def split_outside_brackets(text: str, delimiter: str = ":") -> list[str]:
    """Split *text* on *delimiter*, ignoring delimiters inside ``[...]`` or ``(...)``."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch in "[(":
            depth += 1
        elif ch in "])":
            depth = max(depth - 1, 0)
        elif ch == delimiter and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def find_closing_bracket(text: str, start: int) -> int | None:
    """Return the index of the ``]`` balancing the ``[`` at *start*, or None."""
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return None


def has_variants(class_name: str) -> bool:
    return len(split_outside_brackets(class_name)) > 1 and not class_name.startswith("[")


def is_negative(class_name: str) -> bool:
    """A single leading dash marks a negative; a double dash is a custom property."""
    return class_name.startswith("-") and not class_name.startswith("--")


def has_arbitrary(class_name: str) -> bool:
    return _ARBITRARY_RE.search(class_name) is not None


def extract_utility(class_name: str) -> str:
    """Return the last colon-delimited segment of *class_name*."""
    return split_outside_brackets(class_name)[-1]


def extract_variants(class_name: str) -> list[str]:
    return split_outside_brackets(class_name)[:-1]


def combine_with_variants(utility: str, variants: list[str] | tuple[str, ...]) -> str:
    if not variants:
        return utility
    return ":".join([*variants, utility])


def normalize_arbitrary_value(value: str) -> str:
    """Replace unescaped underscores with spaces and unescape ``\\_``.

    >>> normalize_arbitrary_value("1fr_2fr")
    '1fr 2fr'
    """
    return _UNESCAPED_UNDERSCORE_RE.sub(" ", value).replace("\\_", "_")


def parse_arbitrary_value(text: str) -> tuple[str | None, str] | None:
    """Split a bracketed value into ``(type_hint, normalized_value)``.

    Returns None when *text* is not a single non-empty bracketed value.

    >>> parse_arbitrary_value("[color:red]")
    ('color', 'red')
    >>> parse_arbitrary_value("[#ff0000]")
    (None, '#ff0000')
    """
    match = _TYPED_ARBITRARY_RE.match(text)
    if not match:
        return None
    type_hint, value = match.groups()
    return type_hint, normalize_arbitrary_value(value)


def create_class_name(
    utility: str,
    variants: list[str] | tuple[str, ...] = (),
    negative: bool = False,
    important: bool = False,
) -> str:
    """Assemble a token from its parts: ``variants:!-utility``."""
    result = utility
    if negative:
        result = f"-{result}"
    if important:
        result = f"!{result}"
    return combine_with_variants(result, variants)
