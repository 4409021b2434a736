"""Environment-driven settings for the command-line tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from friendly_words.discovery import find_dict_path
from friendly_words.errors import ConfigError
from friendly_words.ingest import InvalidNamePolicy


@dataclass(frozen=True)
class Settings:
    """
    Settings loaded from environment variables.

    CLI options take precedence over anything read here.
    """

    dict_path: Path
    log_level: str
    invalid_name_policy: InvalidNamePolicy

    @classmethod
    def load(cls) -> "Settings":
        log_level = os.getenv("FRIENDLY_WORDS_LOG_LEVEL", "WARNING").upper()

        policy_raw = os.getenv("FRIENDLY_WORDS_INVALID_NAME_POLICY", "skip").strip().lower()
        try:
            policy = InvalidNamePolicy(policy_raw)
        except ValueError:
            choices = ", ".join(p.value for p in InvalidNamePolicy)
            raise ConfigError(
                f"FRIENDLY_WORDS_INVALID_NAME_POLICY must be one of {choices}, got: {policy_raw}"
            ) from None

        return cls(
            dict_path=find_dict_path(),
            log_level=log_level,
            invalid_name_policy=policy,
        )
