"""Lark Transformer that flattens variant groups into individual tokens."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Transformer
from lark.exceptions import LarkError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _group_parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


class GroupExpander(Transformer):  # type: ignore[type-arg]
    """Turn a parse tree of tokens and groups into a flat list of tokens."""

    def group(self, items: list[object]) -> list[str]:
        prefix = str(items[0])
        important = prefix.startswith("!")
        if important:
            prefix = prefix[1:]
        expanded: list[str] = []
        for item in items[1:]:
            for token in _flatten(item):
                token = f"{prefix}{token}"
                expanded.append(f"!{token}" if important else token)
        return expanded

    def start(self, items: list[object]) -> list[str]:
        tokens: list[str] = []
        for item in items:
            tokens.extend(_flatten(item))
        return tokens


def _flatten(item: object) -> list[str]:
    if isinstance(item, list):
        return item
    return [str(item)]


def split_top_level(text: str) -> list[str]:
    """Split *text* on whitespace that is outside parentheses and brackets.

    Unbalanced openers swallow the rest of the string into one chunk.
    """
    chunks: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        if ch.isspace() and depth == 0:
            if current:
                chunks.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        chunks.append("".join(current))
    return chunks


def expand_variant_groups(text: str) -> list[str]:
    """Expand ``prefix:(a b)`` groups into ``prefix:a prefix:b``.

    Each whitespace-delimited chunk is expanded on its own so a malformed
    group only degrades that chunk, which falls back to plain whitespace
    splitting.

    >>> expand_variant_groups("dark:hover:(bg-gray-800 text-white) p-4")
    ['dark:hover:bg-gray-800', 'dark:hover:text-white', 'p-4']
    """
    tokens: list[str] = []
    parser = _group_parser()
    for chunk in split_top_level(text):
        if "(" not in chunk:
            tokens.append(chunk)
            continue
        try:
            tree = parser.parse(chunk)
        except LarkError as exc:
            logger.debug("Malformed variant group %r: %s", chunk, exc)
            tokens.extend(chunk.split())
            continue
        tokens.extend(GroupExpander().transform(tree))
    return tokens
