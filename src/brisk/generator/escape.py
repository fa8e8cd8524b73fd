"""CSS identifier escaping for class selectors."""

from __future__ import annotations

_RESERVED = frozenset(":[]()/!@#$%^&*+=~`{}|\\;,.?<>'\"")


def escape_class_name(name: str) -> str:
    """Escape *name* so it can follow a ``.`` in a selector.

    Reserved punctuation is backslash-escaped and a leading digit (or a digit
    after a leading dash) becomes a hex escape.

    >>> escape_class_name("hover:bg-red-500/50")
    'hover\\\\:bg-red-500\\\\/50'
    >>> escape_class_name("2xl:p-4")
    '\\\\32 xl\\\\:p-4'
    """
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch in _RESERVED:
            out.append(f"\\{ch}")
        elif ch.isspace():
            out.append("\\ ")
        elif ch.isdigit() and (i == 0 or (i == 1 and name[0] == "-")):
            out.append(f"\\{ord(ch):x} ")
        else:
            out.append(ch)
    return "".join(out)


def class_selector(name: str) -> str:
    return f".{escape_class_name(name)}"
