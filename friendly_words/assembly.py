"""
Map validated word sets onto named accessors.

``FriendlyWords`` is the runtime registry (``words.Animals``), and
``render_module`` writes the same mapping out as an importable Python module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from friendly_words.collection import WordCollection
from friendly_words.errors import UnknownWordSet
from friendly_words.ingest import IngestionResult, InvalidNamePolicy, WordSet, ingest
from friendly_words.issues import DuplicatePropertyName, ValidationIssue

logger = logging.getLogger(__name__)


def assemble(
    word_sets: Iterable[WordSet],
) -> Tuple[Dict[str, WordCollection], List[ValidationIssue]]:
    """Build one collection per property name; later duplicates are reported and dropped."""
    accessors: Dict[str, WordCollection] = {}
    owners: Dict[str, str] = {}
    issues: List[ValidationIssue] = []

    for word_set in word_sets:
        name = word_set.property_name
        if name in accessors:
            issues.append(
                DuplicatePropertyName(
                    property_name=name,
                    source_name=word_set.source_name,
                    first_source_name=owners[name],
                )
            )
            continue
        accessors[name] = WordCollection(word_set.words)
        owners[name] = word_set.source_name

    return accessors, issues


class FriendlyWords:
    """Named word collections, reachable as attributes or items."""

    def __init__(
        self,
        word_sets: Iterable[WordSet] = (),
        issues: Iterable[ValidationIssue] = (),
    ):
        accessors, duplicates = assemble(word_sets)
        self._accessors = accessors
        self.issues: Tuple[ValidationIssue, ...] = tuple(issues) + tuple(duplicates)
        for issue in duplicates:
            logger.warning("%s", issue)

    @classmethod
    def from_result(cls, result: IngestionResult) -> "FriendlyWords":
        return cls(result.word_sets, result.issues)

    @classmethod
    def from_directory(
        cls,
        root: Union[str, Path],
        *,
        invalid_name_policy: InvalidNamePolicy = InvalidNamePolicy.SKIP,
    ) -> "FriendlyWords":
        # Local import: discovery touches the filesystem, assembly does not need it otherwise.
        from friendly_words.discovery import discover_sources

        result = ingest(discover_sources(root), invalid_name_policy=invalid_name_policy)
        return cls.from_result(result)

    def names(self) -> List[str]:
        return list(self._accessors)

    def get(self, name: str, default: Optional[WordCollection] = None) -> Optional[WordCollection]:
        return self._accessors.get(name, default)

    def __getitem__(self, name: str) -> WordCollection:
        try:
            return self._accessors[name]
        except KeyError:
            raise UnknownWordSet(f"No word set named {name!r}") from None

    def __getattr__(self, name: str) -> WordCollection:
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __contains__(self, name: object) -> bool:
        return name in self._accessors

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessors)

    def __len__(self) -> int:
        return len(self._accessors)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._accessors))

    def __repr__(self) -> str:
        return f"FriendlyWords({', '.join(self._accessors)})"


_MODULE_HEADER = '''"""Generated word collections - do not edit."""

from friendly_words.collection import WordCollection as _WordCollection

'''

_MODULE_FOOTER = '''

__all__ = ["_WORDS"] + list(_WORDS)


def __getattr__(name):
    try:
        return _WORDS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
'''


def render_module(word_sets: Iterable[WordSet]) -> Tuple[str, List[ValidationIssue]]:
    """
    Render word sets as the source of an importable module.

    The module exposes ``_WORDS`` (property name -> ``WordCollection``) and
    resolves ``module.<PropertyName>`` through a module-level ``__getattr__``.
    Its own names all start with "_", so no accessor name can shadow them.
    Returns the source and any duplicate-name issues found while assembling.
    """
    word_sets = list(word_sets)
    _, issues = assemble(word_sets)

    kept: Dict[str, WordSet] = {}
    for word_set in word_sets:
        kept.setdefault(word_set.property_name, word_set)

    lines = ["_WORDS = {"]
    for word_set in kept.values():
        lines.append(f"    {word_set.property_name!r}: _WordCollection(")
        lines.append("        [")
        for word in word_set.words:
            lines.append(f"            {word!r},")
        lines.append("        ]")
        lines.append("    ),")
    lines.append("}")

    return _MODULE_HEADER + "\n".join(lines) + "\n" + _MODULE_FOOTER, issues
