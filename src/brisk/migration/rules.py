"""Default Tailwind -> brisk mapping rules and reporting categories.

Rules are checked in order and the first match decides the verdict.
"""

from __future__ import annotations

from brisk.migration.model import MappingRule

SAME = "$&"

TAILWIND_RULES: tuple[MappingRule, ...] = (
    # spacing
    MappingRule(r"^(p|m|px|py|pt|pb|pl|pr|mx|my|mt|mb|ml|mr)-(.+)$", SAME, True, name="spacing"),
    MappingRule(r"^(gap|gap-x|gap-y)-(.+)$", SAME, True, name="gap"),
    MappingRule(r"^(space-x|space-y)-(.+)$", SAME, True, name="space"),
    # layout
    MappingRule(r"^(flex|grid|block|inline|inline-block|inline-flex|hidden)$", SAME, True, name="display"),
    MappingRule(
        r"^(items|justify|content|place)-(start|end|center|between|around|evenly|stretch)$",
        SAME,
        True,
        name="alignment",
    ),
    MappingRule(r"^(flex-row|flex-col|flex-wrap|flex-nowrap)$", SAME, True, name="flex-direction"),
    MappingRule(r"^(grid-cols|grid-rows)-(.+)$", SAME, True, name="grid-template"),
    MappingRule(r"^(col|row)-(span|start|end)-(.+)$", SAME, True, name="grid-placement"),
    # sizing
    MappingRule(r"^(w|h|min-w|max-w|min-h|max-h)-(.+)$", SAME, True, name="sizing"),
    MappingRule(r"^(size)-(.+)$", SAME, True, name="size"),
    MappingRule(r"^aspect-(.+)$", SAME, True, name="aspect"),
    # typography
    MappingRule(r"^(text|font)-(.+)$", SAME, True, name="text"),
    MappingRule(r"^(leading|tracking|line-clamp)-(.+)$", SAME, True, name="text-spacing"),
    MappingRule(r"^(uppercase|lowercase|capitalize|normal-case)$", SAME, True, name="text-transform"),
    MappingRule(r"^(truncate|whitespace|break|hyphens)-?(.*)$", SAME, True, name="text-wrap"),
    # colors
    MappingRule(
        r"^(bg|text|border|ring|outline|shadow|accent|caret|fill|stroke)-(.+)$",
        SAME,
        True,
        name="colors",
    ),
    MappingRule(r"^(from|via|to)-(.+)$", SAME, True, name="gradient-stops"),
    # borders
    MappingRule(r"^(border|rounded|ring|outline)-?(.*)$", SAME, True, name="borders"),
    # effects
    MappingRule(
        r"^(shadow|opacity|blur|brightness|contrast|grayscale|invert|saturate|sepia)-?(.*)$",
        SAME,
        True,
        name="effects",
    ),
    MappingRule(r"^(backdrop|filter|drop-shadow)-(.+)$", SAME, True, name="filters"),
    # transforms
    MappingRule(r"^(translate|rotate|scale|skew|origin)-(.+)$", SAME, True, name="transforms"),
    MappingRule(r"^(-?)(translate|rotate|scale|skew)-(.+)$", SAME, True, name="negative-transforms"),
    # transitions and animation
    MappingRule(r"^(transition|duration|ease|delay)-?(.*)$", SAME, True, name="transitions"),
    MappingRule(r"^animate-(.+)$", SAME, True, name="animation"),
    # interactivity
    MappingRule(r"^(cursor|pointer-events|resize|select|touch|scroll)-(.+)$", SAME, True, name="interactivity"),
    # positioning
    MappingRule(r"^(relative|absolute|fixed|sticky|static)$", SAME, True, name="position"),
    MappingRule(r"^(top|right|bottom|left|inset|z)-(.+)$", SAME, True, name="inset"),
    # visibility
    MappingRule(r"^(visible|invisible|collapse)$", SAME, True, name="visibility"),
    MappingRule(r"^(overflow|overscroll)-(.+)$", SAME, True, name="overflow"),
    # flexbox and grid
    MappingRule(r"^(flex|grow|shrink|basis|order|grid-flow)-(.+)$", SAME, True, name="flex-grid"),
    MappingRule(r"^(auto-cols|auto-rows)-(.+)$", SAME, True, name="grid-auto"),
    # container and accessibility
    MappingRule(r"^container$", SAME, True, name="container"),
    MappingRule(r"^(mx-auto)$", SAME, True, name="mx-auto"),
    MappingRule(r"^sr-only$", SAME, True, name="sr-only"),
    MappingRule(r"^not-sr-only$", SAME, True, name="not-sr-only"),
    # deprecated or changed
    MappingRule(
        r"^divide-(x|y)-(.+)$",
        "border-$1-$2",
        False,
        deprecated=True,
        warning="divide-* utilities should use border utilities with appropriate child selectors",
        name="divide-width",
    ),
    MappingRule(
        r"^divide-(solid|dashed|dotted|double|none)$",
        "border-$1",
        False,
        deprecated=True,
        warning="divide-* utilities should use border utilities",
        name="divide-style",
    ),
    MappingRule(
        r"^ring-offset-(.+)$",
        "ring-offset-$1",
        True,
        warning="Consider using outline utilities for better accessibility",
        name="ring-offset",
    ),
    # directives
    MappingRule(
        r"@tailwind\s+(base|components|utilities)",
        "@layer $1",
        False,
        warning="Replace @tailwind directive with @layer",
        name="tailwind-directive",
    ),
    # enhancements
    MappingRule(
        r"^hover:(bg-[^\s]+)\s+hover:(text-[^\s]+)$",
        "hover:($1 $2)",
        True,
        warning="brisk supports variant groups for cleaner syntax",
        name="hover-group",
    ),
)

CATEGORIES: tuple[tuple[str, str], ...] = (
    ("spacing", r"^(p|m|px|py|pt|pb|pl|pr|mx|my|mt|mb|ml|mr|gap|space)-"),
    ("layout", r"^(flex|grid|block|inline|hidden|items|justify|content|place)-"),
    ("sizing", r"^(w|h|min-w|max-w|min-h|max-h|size|aspect)-"),
    ("typography", r"^(text|font|leading|tracking|line-clamp|truncate|whitespace)"),
    ("colors", r"^(bg|text|border|ring|outline|shadow|accent|caret|fill|stroke|from|via|to)-"),
    ("borders", r"^(border|rounded|ring|outline)-"),
    ("effects", r"^(shadow|opacity|blur|brightness|contrast|grayscale|backdrop|filter)"),
    ("transforms", r"^(-?)(translate|rotate|scale|skew|origin)-"),
    ("transitions", r"^(transition|duration|ease|delay|animate)-"),
    ("interactivity", r"^(cursor|pointer-events|resize|select|touch|scroll)-"),
    ("positioning", r"^(relative|absolute|fixed|sticky|static|top|right|bottom|left|inset|z)-"),
)

UTILITY_SHAPE = r"^[a-z][a-z0-9-]*(-[a-z0-9]+)*$"
