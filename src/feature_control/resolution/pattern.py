"""Resolution – OverridePattern and flag-name matching.

Two kinds of pattern are supported:

* **exact** – equal to the canonical name (``clamp_point_size``) or to its
  camelCase form (``clampPointSize``), case-sensitively;
* **wildcard** – ends with ``*``; the remaining prefix is compared
  case-insensitively with the start of the canonical name.

With ``ignore_separators=True`` the wildcard prefix and the canonical name
are compared with every ``_`` removed, so ``preferD*`` also matches
``prefer_draw_clear``.  Exact matching is unaffected by that switch.
"""
from __future__ import annotations

import dataclasses
from enum import Enum

from feature_control.kernel.naming import is_alternate_form, strip_separators

WILDCARD = "*"


class PatternKind(str, Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"


@dataclasses.dataclass(frozen=True)
class OverridePattern:
    """A single override pattern as supplied by the caller."""

    text: str
    kind: PatternKind = PatternKind.EXACT

    @classmethod
    def parse(cls, text: str) -> "OverridePattern":
        kind = PatternKind.WILDCARD if text.endswith(WILDCARD) else PatternKind.EXACT
        return cls(text=text, kind=kind)

    @property
    def prefix(self) -> str:
        """The text without its trailing wildcard marker."""
        if self.kind is PatternKind.WILDCARD:
            return self.text[: -len(WILDCARD)]
        return self.text

    def matches(self, name: str, *, ignore_separators: bool = False) -> bool:
        if self.kind is PatternKind.EXACT:
            return self.text == name or is_alternate_form(self.text, name)

        prefix = self.prefix
        if ignore_separators:
            prefix = strip_separators(prefix)
            name = strip_separators(name)
        if len(name) < len(prefix):
            return False
        return name[: len(prefix)].lower() == prefix.lower()

    def __str__(self) -> str:
        return self.text


__all__ = ["OverridePattern", "PatternKind", "WILDCARD"]
