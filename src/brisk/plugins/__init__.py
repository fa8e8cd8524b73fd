"""Core plugins: default theme, variants and utility rules.

Installation order is significant: the theme comes first (variants read
breakpoints from it), then variants, then utility rule sets in the order
listed in :data:`UTILITY_PLUGINS`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from brisk.plugins.arbitrary import arbitrary
from brisk.plugins.borders import borders
from brisk.plugins.colors import colors
from brisk.plugins.effects import effects
from brisk.plugins.layout import layout
from brisk.plugins.sizing import sizing
from brisk.plugins.spacing import spacing
from brisk.plugins.theme import DEFAULT_THEME, theme_plugin
from brisk.plugins.transforms import transforms
from brisk.plugins.typography import typography
from brisk.plugins.variants import dark_variant, variants_plugin
from brisk.registry.plugin import Plugin

if TYPE_CHECKING:
    from brisk.engine.config import EngineConfig

UTILITY_PLUGINS: tuple[Plugin, ...] = (
    layout,
    spacing,
    sizing,
    colors,
    typography,
    borders,
    effects,
    transforms,
    arbitrary,
)


def default_plugins(config: EngineConfig | None = None) -> list[Plugin]:
    """The full core plugin list for *config* (theme, variants, utilities)."""
    if config is None:
        return [theme_plugin(), variants_plugin(), *UTILITY_PLUGINS]
    return [
        theme_plugin(config.theme),
        variants_plugin(config.dark_mode, config.dark_selector),
        *UTILITY_PLUGINS,
    ]


__all__ = [
    "DEFAULT_THEME",
    "UTILITY_PLUGINS",
    "default_plugins",
    "theme_plugin",
    "variants_plugin",
    "dark_variant",
    "layout",
    "spacing",
    "sizing",
    "colors",
    "typography",
    "borders",
    "effects",
    "transforms",
    "arbitrary",
]
