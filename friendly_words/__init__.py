"""Validated, length-indexed word collections built from plain-text word files."""

from friendly_words.assembly import FriendlyWords, assemble, render_module
from friendly_words.collection import WordCollection
from friendly_words.discovery import discover_sources
from friendly_words.errors import (
    ConfigError,
    FriendlyWordsError,
    IngestionFailed,
    SourceDiscoveryError,
    UnknownWordSet,
)
from friendly_words.ingest import (
    IngestionResult,
    InvalidNamePolicy,
    WordFile,
    WordSet,
    ingest,
    ingest_file,
    ingest_texts,
)
from friendly_words.issues import (
    DuplicatePropertyName,
    EmptySource,
    InvalidName,
    InvalidWord,
    ValidationIssue,
)
from friendly_words.validation import is_alpha_word, property_name_for

__all__ = [
    "ConfigError",
    "DuplicatePropertyName",
    "EmptySource",
    "FriendlyWords",
    "FriendlyWordsError",
    "IngestionFailed",
    "IngestionResult",
    "InvalidName",
    "InvalidNamePolicy",
    "InvalidWord",
    "SourceDiscoveryError",
    "UnknownWordSet",
    "ValidationIssue",
    "WordCollection",
    "WordFile",
    "WordSet",
    "assemble",
    "discover_sources",
    "ingest",
    "ingest_file",
    "ingest_texts",
    "is_alpha_word",
    "property_name_for",
    "render_module",
]
