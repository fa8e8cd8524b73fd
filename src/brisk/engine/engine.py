"""Engine: one cache, one frozen registry, and the pipeline built on them.

    engine = Engine()
    css = engine.compile(["flex", "hover:bg-red-500", "p-4"])

Each Engine owns an independent :class:`PatternCache`; engines are not meant
to be shared across threads, so parallel builds should create one per worker.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from brisk.cache import PatternCache
from brisk.engine.config import EngineConfig
from brisk.generator import Generator
from brisk.matcher import Matcher
from brisk.migration import ClassMapper
from brisk.model.options import GenerateOptions
from brisk.model.parsed import ParsedClass
from brisk.model.result import MatchResult
from brisk.parser import Parser
from brisk.plugins import default_plugins
from brisk.registry import Plugin, RuleRegistry

logger = logging.getLogger(__name__)


class Engine:
    """Compile utility tokens to CSS.

    Args:
        plugins: Plugins to install, in priority order.  Defaults to the core
            plugin set for *config*.
        config: Engine settings.
    """

    def __init__(
        self,
        plugins: Sequence[Plugin] | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.cache = PatternCache()
        self.registry = RuleRegistry()
        self.registry.install_all(plugins if plugins is not None else default_plugins(self.config))
        if self.config.theme:
            self.registry.extend_theme(self.config.theme)
        self.registry.freeze()
        logger.debug(
            "Engine ready: %d plugins, %d rules", len(self.registry.plugins), len(self.registry)
        )

        self.parser = Parser(self.cache, is_variant=self._is_variant)
        self.matcher = Matcher(
            self.registry,
            self.cache,
            prefix=self.config.prefix,
            important=self.config.important,
        )
        self.generator = Generator()
        self.mapper = ClassMapper(self.cache)

    def _is_variant(self, name: str) -> bool:
        return self.registry.is_variant(name, self.cache)

    # ---- pipeline ----------------------------------------------------------

    def parse(self, token: str) -> ParsedClass:
        return self.parser.parse(token)

    def parse_all(self, class_string: str) -> list[ParsedClass]:
        return self.parser.parse_all(class_string)

    def match(self, token: str | ParsedClass) -> MatchResult | None:
        parsed = self.parser.parse(token) if isinstance(token, str) else token
        return self.matcher.match(parsed)

    def match_all(self, tokens: Iterable[str]) -> list[MatchResult]:
        """Expand, parse and match *tokens*; unmatched tokens are dropped."""
        results: list[MatchResult] = []
        for token in tokens:
            for parsed in self.parser.parse_all(token):
                result = self.matcher.match(parsed)
                if result is None:
                    logger.debug("Dropping unmatched token %r", parsed.raw)
                    continue
                results.append(result)
        return results

    def compile(self, tokens: Iterable[str], options: GenerateOptions | None = None) -> str:
        """Compile an ordered list of tokens into one CSS document."""
        return self.generator.generate(self.match_all(tokens), options)

    def generate(self, class_string: str, options: GenerateOptions | None = None) -> str:
        """Compile a whitespace-separated class string."""
        return self.compile([class_string], options)

    def clear_cache(self) -> None:
        """Drop compiled patterns and memoized matches between build passes."""
        logger.debug("Clearing pattern cache (%d entries)", len(self.cache))
        self.cache.clear()
        self.matcher.clear()
