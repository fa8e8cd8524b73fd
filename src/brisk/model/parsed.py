"""ParsedClass: the structured decomposition of one utility token."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedClass:
    """One token split into variants, modifiers and a class body.

    Attributes:
        raw: The token exactly as it was given to the parser.
        utility: Heuristic base name (text before the first dash). Reporting only.
        value: Remainder after the base name, if any.
        variants: Variant names in token order, outermost first.
        opacity: Alpha as a 0-1 fraction, a verbatim arbitrary value (``str``),
            or None.
        arbitrary: Verbatim payload of a bracketed value, if any.
        type_hint: Type hint written inside the brackets (``color`` in
            ``bg-[color:var(--x)]``).
        important: Set by a leading ``!``.
        negative: Set by a single leading ``-``.
        body: The text the matcher evaluates.
        modifier: Raw opacity suffix (without the slash) when one was parsed.
    """

    raw: str
    utility: str = ""
    value: str | None = None
    variants: tuple[str, ...] = ()
    opacity: float | str | None = None
    arbitrary: str | None = None
    type_hint: str | None = None
    important: bool = False
    negative: bool = False
    body: str = ""
    modifier: str | None = None

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def has_arbitrary(self) -> bool:
        return self.arbitrary is not None

    @property
    def full_body(self) -> str:
        """The body with its opacity suffix re-attached."""
        if self.modifier is None:
            return self.body
        return f"{self.body}/{self.modifier}"

    def to_token(self) -> str:
        """Rebuild a token that resolves to the same properties as :attr:`raw`."""
        core = self.full_body
        if self.negative:
            core = f"-{core}"
        if self.important:
            core = f"!{core}"
        return ":".join([*self.variants, core])
