"""Shared constants and enumerations for the password generator."""

from __future__ import annotations

import re
from enum import Enum


class SeparatorMode(str, Enum):
    """How consecutive items are joined."""

    SPACE = "space"
    SYMBOL = "symbol"
    NONE = "none"


class ItemSource(str, Enum):
    """Where a generated item came from."""

    WORDLIST = "wordlist"
    SYNTHETIC = "synthetic"


DIGITS = "0123456789"
SYMBOLS = "!#$%()*+,-./-:;=?@[\\]^_`{|}~"
XML_UNSAFE_SYMBOLS = "<>&\"'"

DEFAULT_COUNT = 6
DEFAULT_MAX_WORD_ATTEMPTS = 10_000
DEFAULT_TIMEOUT_SECONDS = 10.0
WORDLIST_URL_ENV = "PASSGEN_WORDLIST_URL"

DIGIT_RE = re.compile(r"[0-9]")
NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def has_digit(text: str) -> bool:
    return DIGIT_RE.search(text) is not None


def has_symbol(text: str) -> bool:
    """True when ``text`` holds any character outside ASCII letters and digits."""

    return NON_ALNUM_RE.search(text) is not None
