"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from brisk.plugins.variants import DARK_MODES


@dataclass(frozen=True)
class EngineConfig:
    """Settings fixed for the lifetime of an :class:`~brisk.engine.Engine`.

    Attributes:
        prefix: Prefix every utility body must carry (``tw-`` makes ``tw-flex``
            match the ``flex`` rule).  Selectors keep the prefixed name.
        dark_mode: ``"class"`` (``.dark`` ancestor), ``"selector"``
            (``[data-theme="dark"]`` ancestor) or ``"media"``
            (``prefers-color-scheme``).
        dark_selector: Custom ancestor selector for the class/selector modes.
        important: Force ``!important`` on every declaration.
        theme: Theme overrides deep-merged over the default theme.
    """

    prefix: str = ""
    dark_mode: str = "class"
    dark_selector: str | None = None
    important: bool = False
    theme: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.dark_mode not in DARK_MODES:
            raise ValueError(
                f"dark_mode must be one of {', '.join(DARK_MODES)}, got {self.dark_mode!r}"
            )
