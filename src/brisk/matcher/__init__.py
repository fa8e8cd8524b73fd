"""Rule matcher and post-match value rewrites."""

from brisk.matcher.matcher import Matcher, Resolution
from brisk.matcher.values import (
    apply_alpha,
    hex_to_rgb,
    is_color,
    map_values,
    mark_important,
    negate_value,
)

__all__ = [
    "Matcher",
    "Resolution",
    "apply_alpha",
    "hex_to_rgb",
    "is_color",
    "map_values",
    "mark_important",
    "negate_value",
]
