from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerateOptions:
    """Output options for the CSS generator."""

    minify: bool = False
    source_comments: bool = False
    sort_by_property: bool = False
    use_layers: bool = False
