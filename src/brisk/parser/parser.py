"""Token parser: utility class text -> :class:`ParsedClass`.

Parsing runs in a fixed order, each step stripping the syntax it consumed:

1. leading ``!`` (important)
2. variant groups ``prefix:(a b)`` (handled by :meth:`Parser.parse_all`)
3. variants, consumed from the left while the registry recognises them
4. negative ``-`` (but not ``--``)
5. bracketed arbitrary value, with an optional ``hint:``
6. opacity modifier ``/50``, ``/50%``, ``/0.5``, ``/[...]``
7. heuristic utility/value split
"""

from __future__ import annotations

import logging
from typing import Callable

from brisk.cache import PatternCache
from brisk.model.parsed import ParsedClass
from brisk.parser.errors import ParseError
from brisk.parser.groups import expand_variant_groups
from brisk.parser.syntax import find_closing_bracket, split_outside_brackets

__all__ = ["Parser"]

logger = logging.getLogger(__name__)

VariantPredicate = Callable[[str], bool]

_OPACITY_KEY = "parser.opacity"
_OPACITY_SOURCE = r"^(?:(?P<number>\d+(?:\.\d+)?|\.\d+)(?P<percent>%)?|\[(?P<arbitrary>.+)\])$"
_HINT_KEY = "parser.type-hint"
_HINT_SOURCE = r"^(?P<hint>[a-z][a-z-]*):(?P<value>(?!//).+)$"


def _no_variants(name: str) -> bool:
    return False


class Parser:
    """Parse utility tokens against a set of recognised variant names.

    Args:
        cache: Pattern cache shared with the owning engine.
        is_variant: Predicate telling whether a colon-delimited segment is a
            known variant.  Bracketed segments (``[&:hover]``) are always
            accepted as arbitrary variants.
    """

    def __init__(
        self, cache: PatternCache, is_variant: VariantPredicate | None = None
    ) -> None:
        self._cache = cache
        self._is_variant = is_variant or _no_variants

    # ---- public API -----------------------------------------------------

    def expand(self, class_string: str) -> list[str]:
        """Expand variant groups and split *class_string* into tokens."""
        return expand_variant_groups(class_string)

    def parse_all(self, class_string: str) -> list[ParsedClass]:
        """Parse every token in a whitespace-separated class string.

        Tokens the single-token parser rejects (a bare ``(a)`` group with no
        variant prefix) are logged and dropped.
        """
        parsed: list[ParsedClass] = []
        for token in self.expand(class_string):
            if not token:
                continue
            try:
                parsed.append(self.parse(token))
            except ParseError as exc:
                logger.debug("Dropping unparseable token %r: %s", token, exc)
        return parsed

    def parse(self, token: str) -> ParsedClass:
        """Parse a single token (no variant groups) into a :class:`ParsedClass`."""
        raw = token
        text = token.strip()
        important = False

        if text.startswith("!"):
            important = True
            text = text[1:]

        segments = split_outside_brackets(text, ":")
        variants: list[str] = []
        index = 0
        while index < len(segments) - 1 and self.is_variant(segments[index]):
            variants.append(segments[index])
            index += 1
        body = ":".join(segments[index:])

        if body.startswith("!"):
            important = True
            body = body[1:]

        if body.startswith("(") and body.endswith(")"):
            raise ParseError(
                f"Variant group in {raw!r}; expand it with parse_all()",
                token=raw,
                position=len(raw) - len(body),
            )

        negative = False
        if body.startswith("-") and not body.startswith("--") and len(body) > 1:
            negative = True
            body = body[1:]

        arbitrary, type_hint, bracket_end = self._extract_arbitrary(body)

        opacity: float | str | None = None
        modifier: str | None = None
        slash = self._find_modifier_slash(body, bracket_end)
        if slash is not None:
            candidate = body[slash + 1:]
            opacity = self._parse_opacity(candidate)
            if opacity is not None:
                modifier = candidate
                body = body[:slash]

        utility, value = self._split_utility(body, arbitrary is not None)

        return ParsedClass(
            raw=raw,
            utility=utility,
            value=value,
            variants=tuple(variants),
            opacity=opacity,
            arbitrary=arbitrary,
            type_hint=type_hint,
            important=important,
            negative=negative,
            body=body,
            modifier=modifier,
        )

    def is_variant(self, segment: str) -> bool:
        if not segment:
            return False
        if segment.startswith("[") and segment.endswith("]"):
            return find_closing_bracket(segment, 0) == len(segment) - 1 and len(segment) > 2
        return self._is_variant(segment)

    # ---- steps ----------------------------------------------------------

    def _extract_arbitrary(self, body: str) -> tuple[str | None, str | None, int | None]:
        """Return ``(payload, type_hint, closing_index)`` for a bracketed value.

        Malformed or empty brackets yield ``(None, None, None)`` and the body is
        left to be matched literally.
        """
        if body.startswith("["):
            start = 0
        else:
            dash = body.find("-[")
            if dash == -1:
                return None, None, None
            start = dash + 1
        close = find_closing_bracket(body, start)
        if close is None:
            return None, None, None
        rest = body[close + 1:]
        if rest and not rest.startswith("/"):
            return None, None, None
        inner = body[start + 1:close]
        if not inner.strip():
            return None, None, None
        hint_match = self._cache.get_or_compile(_HINT_KEY, _HINT_SOURCE).match(inner)
        if hint_match and start > 0:
            return hint_match.group("value"), hint_match.group("hint"), close
        return inner, None, close

    @staticmethod
    def _find_modifier_slash(body: str, bracket_end: int | None) -> int | None:
        """Find the ``/`` introducing an opacity modifier, outside brackets."""
        depth = 0
        found: int | None = None
        begin = bracket_end + 1 if bracket_end is not None else 0
        for i in range(begin, len(body)):
            ch = body[i]
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth = max(depth - 1, 0)
            elif ch == "/" and depth == 0:
                found = i
        if found is None or found == 0:
            return None
        return found

    def _parse_opacity(self, text: str) -> float | str | None:
        """Normalise an opacity modifier; None when it is not a valid modifier."""
        match = self._cache.get_or_compile(_OPACITY_KEY, _OPACITY_SOURCE).match(text)
        if match is None:
            return None
        arbitrary = match.group("arbitrary")
        if arbitrary is not None:
            return arbitrary if arbitrary.strip() else None
        number = match.group("number")
        amount = float(number)
        if match.group("percent") or "." not in number or amount > 1:
            amount /= 100
        return min(max(amount, 0.0), 1.0)

    @staticmethod
    def _split_utility(body: str, has_arbitrary: bool) -> tuple[str, str | None]:
        base = body
        if has_arbitrary:
            bracket = body.find("[")
            base = body[:bracket].rstrip("-")
        dash = base.find("-", 1)
        if dash == -1:
            return base, None
        return base[:dash], base[dash + 1:] or None
