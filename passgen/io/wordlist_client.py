"""Lightweight HTTP client for fetching word lists."""

from __future__ import annotations

import os
from typing import Optional

import requests

from ..core.constants import DEFAULT_TIMEOUT_SECONDS, WORDLIST_URL_ENV
from ..core.exceptions import WordListLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class WordListClient:
    """Downloads a plain-text word list served from a static path."""

    def __init__(
        self,
        url: Optional[str] = None,
        url_env: str = WORDLIST_URL_ENV,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.url = url or os.environ.get(url_env)
        self.url_env = url_env
        self.timeout_seconds = timeout_seconds
        if not self.url:
            raise WordListLoadError(
                f"No word list URL given and environment variable {self.url_env} is unset"
            )

    def fetch_text(self) -> str:
        """GET the word list and return the decoded body."""
        LOGGER.info("Fetching word list from %s", self.url)
        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordListLoadError(f"Word list request failed: {exc}") from exc

        if response.encoding is None:
            response.encoding = "utf-8"
        text = response.text
        LOGGER.debug("Fetched %d bytes of word list", len(response.content))
        return text
