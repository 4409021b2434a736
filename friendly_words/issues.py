"""
Structured diagnostics produced while ingesting word files.

Issues are plain values: the pipeline never raises for bad input, it collects
one of these per problem and keeps going. Rendering them for people is left to
whoever consumes the list (see ``friendly_words.cli``).
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import ClassVar, Optional

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue(abc.ABC):
    code: ClassVar[str] = ""
    severity: ClassVar[str] = ERROR

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    @abc.abstractmethod
    def value(self) -> str:
        """The offending text this issue is about."""

    @property
    @abc.abstractmethod
    def source(self) -> str:
        """Where the issue was found."""

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def __str__(self) -> str:
        return f"{self.code}: {self.kind} {self.value!r} ({self.source})"


@dataclass(frozen=True)
class InvalidName(ValidationIssue):
    """Word file name contains non-alphabet characters."""

    code: ClassVar[str] = "FWDN-codegen-001"

    name: str

    @property
    def value(self) -> str:
        return self.name

    @property
    def source(self) -> str:
        return self.name


@dataclass(frozen=True)
class InvalidWord(ValidationIssue):
    """Word contains non-alphabet characters (or is empty)."""

    code: ClassVar[str] = "FWDN-codegen-002"

    word: str
    source_name: str
    line: Optional[int] = None

    @property
    def value(self) -> str:
        return self.word

    @property
    def source(self) -> str:
        if self.line is None:
            return self.source_name
        return f"{self.source_name}:{self.line}"


@dataclass(frozen=True)
class EmptySource(ValidationIssue):
    """Source text was empty or whitespace only."""

    code: ClassVar[str] = "FWDN-codegen-003"
    severity: ClassVar[str] = WARNING

    source_name: str

    @property
    def value(self) -> str:
        return ""

    @property
    def source(self) -> str:
        return self.source_name

    def __str__(self) -> str:
        return f"{self.code}: {self.kind} ({self.source_name})"


@dataclass(frozen=True)
class DuplicatePropertyName(ValidationIssue):
    """Two sources title-case to the same accessor name; the later one is dropped."""

    code: ClassVar[str] = "FWDN-codegen-004"

    property_name: str
    source_name: str
    first_source_name: str

    @property
    def value(self) -> str:
        return self.property_name

    @property
    def source(self) -> str:
        return f"{self.source_name}, already used by {self.first_source_name}"
