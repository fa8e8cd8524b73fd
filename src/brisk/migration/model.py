"""Migration data model: mapping rules, per-class verdicts and reports."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Union

Replacement = Union[str, Callable[["re.Match[str]"], str]]


@dataclass(frozen=True)
class MappingRule:
    """One foreign-dialect pattern and what it translates to.

    Attributes:
        pattern: Regular expression source, searched against the token.
        replacement: Template using ``$&`` (whole match) and ``$1``..``$9``
            (capture groups), or a callable receiving the match.  ``"$&"``
            means "unchanged".
        compatible: Whether the token works as-is.
        deprecated: Whether the token should be rewritten.
        warning: Human-readable note attached to the verdict.
        name: Stable identifier used as the pattern cache key.
    """

    pattern: str
    replacement: Replacement
    compatible: bool
    deprecated: bool = False
    warning: str | None = None
    name: str = ""


@dataclass(frozen=True)
class ClassMapping:
    """Verdict for one token."""

    original: str
    mapped: str | None = None
    compatible: bool = True
    deprecated: bool = False
    replacement: str | None = None
    warning: str | None = None


@dataclass(frozen=True)
class CompatibilityReport:
    total: int
    compatible: int
    incompatible: tuple[ClassMapping, ...] = field(default_factory=tuple)
    deprecated: tuple[ClassMapping, ...] = field(default_factory=tuple)
    warnings: tuple[ClassMapping, ...] = field(default_factory=tuple)
    compatibility_rate: int = 100

    def summary(self) -> str:
        return (
            f"{self.compatible}/{self.total} compatible ({self.compatibility_rate}%), "
            f"{len(self.deprecated)} deprecated, {len(self.incompatible)} incompatible, "
            f"{len(self.warnings)} with warnings"
        )
