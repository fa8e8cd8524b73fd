"""CSS generator: match results -> stylesheet text.

Generation is a pure function of ``(results, options)``.  All ordering comes
from the result list itself (first-seen) or from the explicit sort key; no
step depends on set or hash ordering, so repeated calls are byte-identical.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from brisk.model.options import GenerateOptions
from brisk.model.result import MatchResult
from brisk.model.rule import Layer, Properties

__all__ = ["Generator", "generate"]

_INDENT = "  "


@dataclass
class _Block:
    """One selector's merged declarations inside a given at-rule context."""

    selector: str
    at_rules: tuple[str, ...]
    properties: Properties = field(default_factory=dict)
    tokens: list[str] = field(default_factory=list)


@dataclass
class _Wrapper:
    header: str
    children: list[_Node] = field(default_factory=list)


_Node = Union[_Block, _Wrapper]


class Generator:
    """Render :class:`MatchResult` lists into CSS text."""

    def generate(
        self, results: Iterable[MatchResult], options: GenerateOptions | None = None
    ) -> str:
        options = options or GenerateOptions()
        by_layer: dict[Layer, list[MatchResult]] = {}
        for result in results:
            if result.is_empty:
                continue
            by_layer.setdefault(result.layer, []).append(result)

        sections: list[_Node] = []
        for layer in sorted(by_layer):
            ordered = by_layer[layer]
            if options.sort_by_property:
                ordered = sorted(ordered, key=lambda r: (r.sort_key, len(r.parsed.variants)))
            nodes = _nest(_merge(ordered))
            if options.use_layers:
                sections.append(_Wrapper(header=f"@layer {layer.css_name}", children=nodes))
            else:
                sections.extend(nodes)

        if options.minify:
            return "".join(_render_min(node, options) for node in sections)
        if not sections:
            return ""
        return "\n\n".join(_render_pretty(node, options, 0) for node in sections) + "\n"


def generate(results: Iterable[MatchResult], options: GenerateOptions | None = None) -> str:
    """Module-level shorthand for ``Generator().generate``."""
    return Generator().generate(results, options)


# ---------------------------------------------------------------------------
# Block assembly
# ---------------------------------------------------------------------------


def _merge(results: list[MatchResult]) -> list[_Block]:
    """Merge results sharing selector and at-rule context, keeping first position."""
    blocks: dict[tuple[tuple[str, ...], str], _Block] = {}
    for result in results:
        pieces = [(result.selector, result.properties), *result.nested.items()]
        for selector, props in pieces:
            if not props:
                continue
            key = (result.at_rules, selector)
            block = blocks.get(key)
            if block is None:
                block = blocks[key] = _Block(selector=selector, at_rules=result.at_rules)
            block.properties.update(props)
            if result.parsed.raw not in block.tokens:
                block.tokens.append(result.parsed.raw)
    return list(blocks.values())


def _nest(blocks: list[_Block]) -> list[_Node]:
    """Wrap blocks in their at-rules, sharing a wrapper between neighbours."""
    root: list[_Node] = []
    for block in blocks:
        container = root
        for header in block.at_rules:
            last = container[-1] if container else None
            if isinstance(last, _Wrapper) and last.header == header:
                container = last.children
            else:
                wrapper = _Wrapper(header=header)
                container.append(wrapper)
                container = wrapper.children
        container.append(block)
    return root


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _comment(block: _Block) -> str:
    return f"/* {' '.join(block.tokens)} */"


def _render_pretty(node: _Node, options: GenerateOptions, depth: int) -> str:
    pad = _INDENT * depth
    if isinstance(node, _Wrapper):
        inner = "\n".join(_render_pretty(child, options, depth + 1) for child in node.children)
        return f"{pad}{node.header} {{\n{inner}\n{pad}}}"
    lines: list[str] = []
    if options.source_comments:
        lines.append(f"{pad}{_comment(node)}")
    lines.append(f"{pad}{node.selector} {{")
    for prop, value in node.properties.items():
        lines.append(f"{pad}{_INDENT}{prop}: {value};")
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _render_min(node: _Node, options: GenerateOptions) -> str:
    if isinstance(node, _Wrapper):
        inner = "".join(_render_min(child, options) for child in node.children)
        return f"{node.header}{{{inner}}}"
    body = ";".join(f"{prop}:{value}" for prop, value in node.properties.items())
    comment = _comment(node) if options.source_comments else ""
    return f"{comment}{node.selector}{{{body}}}"
