#!/usr/bin/env python3
"""
Command-line entry point for checking and generating word collections.

    friendly-words check dict/
    friendly-words stats dict/
    friendly-words generate dict/ --output words_generated.py
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import typer

from friendly_words.assembly import FriendlyWords, render_module
from friendly_words.config import Settings
from friendly_words.discovery import DICT_PATH_ENV, discover_sources
from friendly_words.errors import FriendlyWordsError
from friendly_words.ingest import IngestionResult, InvalidNamePolicy, ingest
from friendly_words.issues import ValidationIssue
from friendly_words.logsetup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Validate word files and build length-indexed word collections")


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def _settings() -> Settings:
    try:
        return Settings.load()
    except FriendlyWordsError as e:
        eprint(f"Error: {e}")
        sys.exit(1)


def _run(root: Optional[str], scan_invalid_names: Optional[bool]) -> IngestionResult:
    settings = _settings()
    root_path = Path(root) if root else settings.dict_path
    if scan_invalid_names is None:
        policy = settings.invalid_name_policy
    else:
        policy = InvalidNamePolicy.SCAN if scan_invalid_names else InvalidNamePolicy.SKIP

    try:
        return ingest(discover_sources(root_path), invalid_name_policy=policy)
    except FriendlyWordsError as e:
        eprint(f"Error: {e}")
        sys.exit(1)


def _report(issues: Iterable[ValidationIssue]) -> None:
    for issue in issues:
        if issue.is_error:
            logger.warning("%s", issue)
        else:
            logger.info("%s", issue)
        eprint(f"{issue.severity}: {issue}")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (or set FRIENDLY_WORDS_LOG_LEVEL env var)",
    ),
):
    """Validate word files and build length-indexed word collections."""
    setup_logging(log_level or _settings().log_level)


@app.command()
def check(
    root: Optional[str] = typer.Argument(
        None,
        envvar=DICT_PATH_ENV,
        help="Directory holding word files (default: ./dict)",
    ),
    scan_invalid_names: Optional[bool] = typer.Option(
        None,
        "--scan-invalid-names/--skip-invalid-names",
        help="Also check the words of files whose name is rejected",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Treat warnings (e.g. empty files) as failures"
    ),
):
    """Validate word files and report every issue found."""
    result = _run(root, scan_invalid_names)
    _report(result.issues)

    failed = result.has_errors or (strict and bool(result.issues))
    if failed:
        eprint(f"❌ {len(result.issues)} issue(s) in word files")
        sys.exit(1)
    print(f"✨ {len(result.word_sets)} word set(s) OK")


@app.command()
def stats(
    root: Optional[str] = typer.Argument(
        None,
        envvar=DICT_PATH_ENV,
        help="Directory holding word files (default: ./dict)",
    ),
):
    """Show per-set word totals and length buckets."""
    result = _run(root, None)
    words = FriendlyWords.from_result(result)
    _report(words.issues)

    print("Friendly Words")
    print("=" * 50)
    total = 0
    for name in words:
        collection = words[name]
        total += collection.total_words()
        print(f"{name}: {collection.total_words()} words in {collection.count()} lengths")
        for length in collection.lengths():
            print(f"  {length:>3}: {len(collection.of_length(length))}")

    print("\nTotal words:", total)


@app.command()
def generate(
    root: Optional[str] = typer.Argument(
        None,
        envvar=DICT_PATH_ENV,
        help="Directory holding word files (default: ./dict)",
    ),
    output: str = typer.Option(
        ...,
        "--output",
        "-o",
        help="Path of the Python module to write",
    ),
    allow_errors: bool = typer.Option(
        False,
        "--allow-errors",
        help="Write the module even if some words or files were rejected",
    ),
):
    """Write a Python module exposing one word collection per word file."""
    result = _run(root, None)
    source, duplicates = render_module(result.word_sets)
    issues = list(result.issues) + duplicates
    _report(issues)

    if any(i.is_error for i in issues) and not allow_errors:
        eprint("❌ Not writing module, fix the issues above or pass --allow-errors")
        sys.exit(1)

    with open(output, "w", encoding="utf-8") as f:
        f.write(source)
    print(f"Wrote {len(result.word_sets) - len(duplicates)} word set(s) to {output}")


if __name__ == "__main__":
    app()
