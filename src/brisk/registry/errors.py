"""Registry error types."""


class RegistryError(Exception):
    """Raised for invalid rule, variant or plugin registrations."""


class RegistryFrozenError(RegistryError):
    """Raised when a frozen registry is modified."""


class PluginInstallError(RegistryError):
    """Raised when a plugin's install step fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, plugin: str, message: str) -> None:
        self.plugin = plugin
        super().__init__(f"Plugin {plugin!r} failed to install: {message}")
