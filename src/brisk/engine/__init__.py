"""Engine: wires cache, registry, parser, matcher, generator and mapper."""

from brisk.engine.config import DARK_MODES, EngineConfig
from brisk.engine.engine import Engine

__all__ = ["Engine", "EngineConfig", "DARK_MODES"]
