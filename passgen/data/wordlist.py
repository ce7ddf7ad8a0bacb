"""Word list loading and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_TIMEOUT_SECONDS, WORDLIST_URL_ENV
from ..core.exceptions import WordListLoadError
from ..io.wordlist_client import WordListClient
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class WordListConfig:
    """Where to load the word list from.

    ``path`` wins over ``url``; with neither set the URL is read from
    ``url_env``.
    """

    path: Path | str | None = None
    url: Optional[str] = None
    url_env: str = WORDLIST_URL_ENV
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


class WordList:
    """Immutable ordered sequence of candidate words.

    Every newline-separated segment of the source counts as a word, blank
    ones included. Blank entries are skipped at draw time but still count
    towards :attr:`average_length`.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: Tuple[str, ...] = tuple(words)
        total = sum(len(word) for word in self._words)
        self._average_length = total / len(self._words) if self._words else 0.0
        self._has_usable_words = any(self._words)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_text(cls, text: str) -> "WordList":
        if not text:
            return cls([])
        return cls(text.replace("\r\n", "\n").split("\n"))

    @classmethod
    def from_path(cls, path: Path | str) -> "WordList":
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc
        word_list = cls.from_text(text)
        LOGGER.info("Loaded %d words from %s", len(word_list), source)
        return word_list

    @classmethod
    def from_url(
        cls,
        url: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        url_env: str = WORDLIST_URL_ENV,
    ) -> "WordList":
        client = WordListClient(url=url, url_env=url_env, timeout_seconds=timeout_seconds)
        word_list = cls.from_text(client.fetch_text())
        LOGGER.info("Loaded %d words from %s", len(word_list), client.url)
        return word_list

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def words(self) -> Sequence[str]:
        return self._words

    @property
    def average_length(self) -> float:
        return self._average_length

    def is_empty(self) -> bool:
        return not self._words

    def has_usable_words(self) -> bool:
        """True when at least one entry is non-blank."""
        return self._has_usable_words

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


def load_word_list(config: WordListConfig) -> WordList:
    """Load a word list from a local file or over HTTP."""

    if config.path is not None:
        return WordList.from_path(config.path)
    return WordList.from_url(
        config.url,
        timeout_seconds=config.timeout_seconds,
        url_env=config.url_env,
    )
