"""Lexical rules shared by word-file names and the words inside them."""

from __future__ import annotations

import re

# \Z rather than $: "foo\n" must not match.
ALPHABET_RE = re.compile(r"^[A-Za-z]+\Z")


def is_alpha_word(text: str) -> bool:
    """True if ``text`` is one or more ASCII letters and nothing else."""
    return bool(ALPHABET_RE.match(text))


def property_name_for(name: str) -> str:
    """
    Title-case a single source name into its accessor name.

    Only the first letter changes; "test" -> "Test", "fooBar" -> "FooBar".
    """
    return name[:1].upper() + name[1:]
