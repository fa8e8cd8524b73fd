"""Plugin protocol and a decorator for function-based plugins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from brisk.registry.registry import RuleRegistry


class Plugin(Protocol):
    """Anything with a name, a version and an ``install(registry)`` step."""

    name: str
    version: str

    def install(self, registry: RuleRegistry) -> None: ...


@dataclass(frozen=True)
class FunctionPlugin:
    """A plugin whose install step is a plain function."""

    name: str
    install_func: Callable[[RuleRegistry], None]
    version: str = "1.0.0"

    def install(self, registry: RuleRegistry) -> None:
        self.install_func(registry)


def plugin(name: str, version: str = "1.0.0") -> Callable[[Callable[[RuleRegistry], None]], FunctionPlugin]:
    """Decorate an install function to turn it into a :class:`FunctionPlugin`.

    >>> @plugin("display")
    ... def display(registry):
    ...     registry.add_rule(StaticRule("flex", {"display": "flex"}))
    """

    def decorator(func: Callable[[RuleRegistry], None]) -> FunctionPlugin:
        return FunctionPlugin(name=name, install_func=func, version=version)

    return decorator
