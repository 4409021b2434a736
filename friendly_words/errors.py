"""Exceptions raised by friendly_words; bad input data is reported as issues instead."""

from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from friendly_words.issues import ValidationIssue


class FriendlyWordsError(Exception):
    """Base class for all friendly_words errors."""


class ConfigError(FriendlyWordsError):
    """An environment setting has a value we cannot use."""


class SourceDiscoveryError(FriendlyWordsError):
    """Word files could not be located or read."""


class UnknownWordSet(FriendlyWordsError, AttributeError, KeyError):
    """No word set was assembled under the requested property name."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return Exception.__str__(self)


class IngestionFailed(FriendlyWordsError):
    """Raised on request when an ingestion run produced error-severity issues."""

    def __init__(self, issues: Sequence["ValidationIssue"]):
        self.issues = tuple(issues)
        super().__init__(
            f"{len(self.issues)} word file issue(s): "
            + "; ".join(str(i) for i in self.issues)
        )
