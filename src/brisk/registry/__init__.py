"""Rule registry: plugin installation, ordered rules, variants and theme."""

from brisk.registry.errors import PluginInstallError, RegistryError, RegistryFrozenError
from brisk.registry.plugin import FunctionPlugin, Plugin, plugin
from brisk.registry.registry import (
    RegisteredRule,
    RuleRegistry,
    TraceEntry,
    compile_pattern,
    deep_merge,
)

__all__ = [
    "RuleRegistry",
    "RegisteredRule",
    "TraceEntry",
    "Plugin",
    "FunctionPlugin",
    "plugin",
    "compile_pattern",
    "deep_merge",
    "RegistryError",
    "RegistryFrozenError",
    "PluginInstallError",
]
