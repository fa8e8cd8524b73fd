"""brisk - a utility-class to CSS compiler with a pluggable rule set."""

__version__ = "0.1.0"

from brisk.engine import Engine, EngineConfig  # noqa: E402
from brisk.model import GenerateOptions, Layer, MatchResult, ParsedClass  # noqa: E402
from brisk.registry import plugin  # noqa: E402

__all__ = [
    "__version__",
    "Engine",
    "EngineConfig",
    "GenerateOptions",
    "Layer",
    "MatchResult",
    "ParsedClass",
    "plugin",
]
