"""CSS generation: escaping, layering, merging and rendering."""

from brisk.generator.escape import class_selector, escape_class_name
from brisk.generator.generator import Generator, generate

__all__ = ["Generator", "generate", "class_selector", "escape_class_name"]
