"""Locate word files on disk and read them into ``WordFile`` objects."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from friendly_words.errors import SourceDiscoveryError
from friendly_words.ingest import WordFile

logger = logging.getLogger(__name__)

DICT_PATH_ENV = "FRIENDLY_WORDS_DICT_PATH"


def find_dict_path() -> Path:
    """Resolve the word file root. Prefer env, else ./dict."""
    env_path = os.environ.get(DICT_PATH_ENV)
    if env_path:
        return Path(env_path).resolve()
    return (Path.cwd() / "dict").resolve()


def _candidate_paths(root: Path, suffix: str) -> List[Path]:
    """
    Flat files (root/<name>.txt) plus the nested dictionary layout
    (root/<name>/<name>.txt), sorted by path.
    """
    found: List[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_file() and entry.suffix == suffix:
            found.append(entry)
        elif entry.is_dir():
            nested = entry / f"{entry.name}{suffix}"
            if nested.is_file():
                found.append(nested)
    return found


def read_word_file(path: Path) -> WordFile:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceDiscoveryError(f"Could not read word file {path}: {e}") from e
    return WordFile.from_text(path.stem, text, origin=str(path))


def discover_sources(
    root: Optional[Union[str, Path]] = None,
    *,
    suffix: str = ".txt",
) -> List[WordFile]:
    """Read every word file under ``root`` (default: ``find_dict_path()``)."""
    root_path = Path(root) if root is not None else find_dict_path()
    if not root_path.is_dir():
        raise SourceDiscoveryError(f"Word file directory not found: {root_path}")

    sources = [read_word_file(p) for p in _candidate_paths(root_path, suffix)]
    logger.debug("Discovered %d word files under %s", len(sources), root_path)
    return sources
