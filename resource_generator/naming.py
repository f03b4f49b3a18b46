"""Name inflection used to derive class, table and route names.

The generator only needs a handful of conversions.  They sit behind the
``Namer`` interface so callers (and tests) can swap in different rules, for
example a project-specific irregular plural list.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod


class Namer(ABC):
    """Case conversion and pluralisation rules."""

    @abstractmethod
    def pluralize(self, word: str) -> str:
        """Return the plural of *word*, preserving its casing."""

    @abstractmethod
    def to_snake_case(self, value: str) -> str:
        """``ZooKeeper`` -> ``zoo_keeper``."""

    @abstractmethod
    def to_camel_case(self, value: str) -> str:
        """``zoo_keeper`` / ``ZooKeeper`` -> ``zooKeeper``."""

    def ucfirst(self, value: str) -> str:
        """Upper-case the first character only: ``zooKeeper`` -> ``ZooKeeper``."""
        return value[:1].upper() + value[1:]


# ---------------------------------------------------------------------------
# English rules
# ---------------------------------------------------------------------------

_IRREGULAR: dict[str, str] = {
    "child": "children",
    "foot": "feet",
    "goose": "geese",
    "man": "men",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "tooth": "teeth",
    "woman": "women",
}

_UNCOUNTABLE: frozenset[str] = frozenset({
    "audio",
    "data",
    "deer",
    "equipment",
    "feedback",
    "fish",
    "information",
    "metadata",
    "money",
    "news",
    "series",
    "sheep",
    "species",
})

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[-_\s]+")


class EnglishNamer(Namer):
    """Small rule-based English inflector.

    Only the last word of a compound name is inflected, so ``ZooKeeper``
    becomes ``ZooKeepers`` and ``SalesPerson`` becomes ``SalesPeople``.
    """

    def __init__(self, irregular: dict[str, str] | None = None) -> None:
        self.irregular = {**_IRREGULAR, **(irregular or {})}

    def pluralize(self, word: str) -> str:
        if not word:
            return word
        parts = _WORD_BOUNDARY.split(word)
        last = parts[-1]
        head = word[: len(word) - len(last)]
        return head + _match_case(last, self._plural_of(last.lower()))

    def _plural_of(self, lower: str) -> str:
        if lower in _UNCOUNTABLE:
            return lower
        if lower in self.irregular:
            return self.irregular[lower]
        if lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
            return lower[:-1] + "ies"
        if lower.endswith(("s", "sh", "ch", "x", "z")):
            return lower + "es"
        return lower + "s"

    def to_snake_case(self, value: str) -> str:
        s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
        s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
        return re.sub(r"[-\s]+", "_", s2).lower()

    def to_camel_case(self, value: str) -> str:
        parts = [p for p in re.split(r"[-_\s]+", value) if p]
        if not parts:
            return ""
        studly = "".join(self.ucfirst(part) for part in parts)
        return studly[0].lower() + studly[1:]


def _match_case(template: str, word: str) -> str:
    """Apply the casing of *template* (all-upper or capitalised) to *word*."""
    if template.isupper() and len(template) > 1:
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word
