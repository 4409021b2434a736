"""
Word file ingestion.

Turns named raw text into validated word sets plus the list of issues found on
the way. One bad file or word never stops the run: the result always carries
every salvageable ``WordSet`` and every issue, in input order.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from friendly_words.errors import IngestionFailed
from friendly_words.issues import EmptySource, InvalidName, InvalidWord, ValidationIssue
from friendly_words.validation import is_alpha_word, property_name_for

logger = logging.getLogger(__name__)

# Only these end a line; \v, \f and \x1c-\x1e stay inside the line (and make it invalid).
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n|\x85|\u2028|\u2029")


def split_lines(text: str) -> List[str]:
    """Split on line breaks; a trailing break does not start another line."""
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class InvalidNamePolicy(str, enum.Enum):
    """What to do with the words of a file whose name is rejected."""

    SKIP = "skip"  # report the name only
    SCAN = "scan"  # also report its invalid words; still no WordSet


@dataclass(frozen=True)
class WordFile:
    name: str
    lines: Tuple[str, ...]
    origin: Optional[str] = None

    @classmethod
    def from_text(cls, name: str, text: str, origin: Optional[str] = None) -> "WordFile":
        return cls(name=name, lines=tuple(split_lines(text)), origin=origin)

    def is_blank(self) -> bool:
        return all(not line.strip() for line in self.lines)


@dataclass(frozen=True)
class WordSet:
    property_name: str
    words: Tuple[str, ...]
    source_name: str = ""


@dataclass(frozen=True)
class IngestionResult:
    word_sets: Tuple[WordSet, ...] = ()
    issues: Tuple[ValidationIssue, ...] = ()

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.is_error]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if not i.is_error]

    @property
    def has_errors(self) -> bool:
        return any(i.is_error for i in self.issues)

    def raise_for_issues(self) -> None:
        if self.has_errors:
            raise IngestionFailed(self.errors)


def _check_words(source: WordFile, issues: List[ValidationIssue]) -> List[str]:
    words: List[str] = []
    for lineno, line in enumerate(source.lines, start=1):
        if is_alpha_word(line):
            words.append(line)
        else:
            issues.append(InvalidWord(word=line, source_name=source.name, line=lineno))
    return words


def ingest_file(
    source: WordFile,
    *,
    invalid_name_policy: InvalidNamePolicy = InvalidNamePolicy.SKIP,
) -> Tuple[Optional[WordSet], List[ValidationIssue]]:
    """Validate one word file. Returns its ``WordSet`` (or None) and its issues."""
    issues: List[ValidationIssue] = []

    if not is_alpha_word(source.name):
        issues.append(InvalidName(name=source.name))
        if invalid_name_policy is InvalidNamePolicy.SCAN and not source.is_blank():
            _check_words(source, issues)
        return None, issues

    if source.is_blank():
        issues.append(EmptySource(source_name=source.name))
        return None, issues

    words = _check_words(source, issues)
    if not words:
        # Every line was rejected; the InvalidWord issues already say why.
        return None, issues

    word_set = WordSet(
        property_name=property_name_for(source.name),
        words=tuple(words),
        source_name=source.name,
    )
    logger.debug(
        "Accepted %s as %s with %d words", source.name, word_set.property_name, len(words)
    )
    return word_set, issues


def ingest(
    files: Iterable[WordFile],
    *,
    invalid_name_policy: InvalidNamePolicy = InvalidNamePolicy.SKIP,
) -> IngestionResult:
    word_sets: List[WordSet] = []
    issues: List[ValidationIssue] = []
    seen = 0

    for source in files:
        seen += 1
        word_set, file_issues = ingest_file(source, invalid_name_policy=invalid_name_policy)
        issues.extend(file_issues)
        if word_set is not None:
            word_sets.append(word_set)

    logger.info(
        "Ingested %d of %d word files (%d issues)", len(word_sets), seen, len(issues)
    )
    return IngestionResult(word_sets=tuple(word_sets), issues=tuple(issues))


def ingest_texts(
    pairs: Iterable[Sequence[str]],
    *,
    invalid_name_policy: InvalidNamePolicy = InvalidNamePolicy.SKIP,
) -> IngestionResult:
    """Ingest ``(name, raw_text)`` pairs in the order given."""
    return ingest(
        (WordFile.from_text(name, text) for name, text in pairs),
        invalid_name_policy=invalid_name_policy,
    )
