"""Kernel naming – conversion between canonical and camelCase flag names.

Canonical names are lower-case tokens joined by ``_``
(``supports_renderpass2``); the alternate form drops the separators and
capitalises every token after the first (``supportsRenderpass2``).
"""
from __future__ import annotations

SEPARATOR = "_"


def to_camel_case(name: str) -> str:
    """Return the compact form of a canonical *name*.

    Empty and single-token names come back unchanged.
    """
    head, *rest = name.split(SEPARATOR)
    return head + "".join(token[:1].upper() + token[1:] for token in rest)


def from_camel_case(compact: str) -> str:
    """Inverse of :func:`to_camel_case`.

    Round-trips for canonical names whose tokens start with a letter.
    """
    out: list[str] = []
    for ch in compact:
        if ch.isupper():
            out.append(SEPARATOR)
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def is_alternate_form(candidate: str, canonical: str) -> bool:
    return candidate == to_camel_case(canonical)


def strip_separators(name: str) -> str:
    return name.replace(SEPARATOR, "")


__all__ = ["SEPARATOR", "from_camel_case", "is_alternate_form", "strip_separators", "to_camel_case"]
