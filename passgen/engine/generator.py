"""Password generation from dictionary words or symbol alphabets.

Each of the ``count`` items is either a word drawn from the word list by
rejection sampling or, when letters are disallowed, a synthetic token drawn
from the digit and symbol alphabets. Items are then re-cased, padded with any
required digit or symbol, joined by the chosen separator and truncated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import (
    DEFAULT_MAX_WORD_ATTEMPTS,
    DIGITS,
    SYMBOLS,
    XML_UNSAFE_SYMBOLS,
    ItemSource,
    SeparatorMode,
    has_digit,
    has_symbol,
)
from ..core.exceptions import (
    ConstraintsUnsatisfiable,
    GenerationError,
    NoCharacterClassSelected,
    WordListUnavailable,
)
from ..core.models import Constraints, GeneratedItem, GenerationOutcome, PasswordResult
from ..data.wordlist import WordList
from ..utils.logger import get_logger
from .random_source import RandomSource


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    digits: str = DIGITS
    symbols: str = SYMBOLS
    xml_unsafe_symbols: str = XML_UNSAFE_SYMBOLS
    max_word_attempts: int = DEFAULT_MAX_WORD_ATTEMPTS

    def symbol_alphabet(self, xml_safe: bool) -> str:
        """Symbols usable under ``xml_safe``; the unsafe extension is opt-out."""
        if xml_safe:
            return self.symbols
        return self.symbols + self.xml_unsafe_symbols


class PasswordGenerator:
    """Builds passwords for a fixed word list and random source."""

    def __init__(
        self,
        word_list: WordList,
        random_source: RandomSource,
        config: Optional[GeneratorConfig] = None,
    ) -> None:
        self.word_list = word_list
        self.random_source = random_source
        self.config = config or GeneratorConfig()
        if self.config.max_word_attempts < 1:
            raise ValueError("max_word_attempts must be at least 1")

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, constraints: Constraints) -> str:
        return self.generate_result(constraints).password

    def try_generate(self, constraints: Constraints) -> GenerationOutcome:
        try:
            return GenerationOutcome(ok=True, password=self.generate(constraints))
        except GenerationError as exc:
            LOGGER.info("Generation failed: %s", exc)
            return GenerationOutcome(ok=False, error=exc)

    def generate_result(self, constraints: Constraints) -> PasswordResult:
        if not constraints.has_any_class:
            raise NoCharacterClassSelected(
                "Select at least one of letters, capitals, numbers or symbols"
            )
        active = constraints.normalized()
        self._check_word_list(active)

        symbols = self.config.symbol_alphabet(active.xml_safe)
        count = active.resolved_count()
        items: List[GeneratedItem] = []
        for index in range(count):
            item = self._build_item(active, symbols)
            if index < count - 1:
                item.separator = self._separator(active.separator, symbols)
            items.append(item)

        untruncated = "".join(item.render() for item in items)
        password = untruncated
        if active.max_len is not None:
            password = untruncated[: active.max_len]
        LOGGER.debug(
            "Generated %d items (%d chars, truncated to %d)",
            len(items), len(untruncated), len(password),
        )
        return PasswordResult(
            password=password,
            items=items,
            untruncated=untruncated,
            cryptographic=self.random_source.cryptographic,
        )

    # ------------------------------------------------------------------
    # Item construction
    # ------------------------------------------------------------------
    def _check_word_list(self, constraints: Constraints) -> None:
        if constraints.uses_words and not self.word_list.has_usable_words():
            raise WordListUnavailable("Word list is empty or still loading")

    def _build_item(self, constraints: Constraints, symbols: str) -> GeneratedItem:
        if constraints.uses_words:
            word = self._draw_word(constraints)
            source = ItemSource.WORDLIST
        else:
            word = self._synthesize_word(constraints, symbols)
            source = ItemSource.SYNTHETIC

        word = self._apply_case(word, constraints)

        if constraints.must_numbers and not has_digit(word):
            word += self._pick(self.config.digits)
        if constraints.must_symbols and not has_symbol(word):
            word += self._pick(symbols)
        return GeneratedItem(text=word, source=source)

    def _draw_word(self, constraints: Constraints) -> str:
        words = self.word_list
        for _ in range(self.config.max_word_attempts):
            word = words[self.random_source.next_uniform(len(words))]
            if not word:
                continue
            if not constraints.may_numbers and has_digit(word):
                continue
            if not constraints.may_symbols and has_symbol(word):
                continue
            return word
        raise ConstraintsUnsatisfiable(
            f"No acceptable word found in {self.config.max_word_attempts} draws "
            f"from {len(words)} entries"
        )

    def _synthesize_word(self, constraints: Constraints, symbols: str) -> str:
        alphabet = ""
        if constraints.may_numbers:
            alphabet += self.config.digits
        if constraints.may_symbols:
            alphabet += symbols
        length = max(1, int(self.word_list.average_length + 0.5))
        return "".join(self._pick(alphabet) for _ in range(length))

    def _apply_case(self, word: str, constraints: Constraints) -> str:
        if constraints.must_capitals:
            word = "".join(
                char.upper() if self.random_source.next_uniform(2) == 1 else char.lower()
                for char in word
            )
        elif constraints.may_capitals and self.random_source.next_uniform(2) == 1:
            word = word[:1].upper() + word[1:]

        # Forced after the random casing so a disallowed case never survives
        if not constraints.may_capitals and constraints.may_letters:
            word = word.lower()
        elif constraints.may_capitals and not constraints.may_letters:
            word = word.upper()
        return word

    def _separator(self, mode: SeparatorMode, symbols: str) -> str:
        if mode == SeparatorMode.SPACE:
            return " "
        if mode == SeparatorMode.SYMBOL:
            return self._pick(symbols)
        return ""

    def _pick(self, alphabet: str) -> str:
        return alphabet[self.random_source.next_uniform(len(alphabet))]


def generate_password(
    constraints: Constraints,
    word_list: WordList,
    random_source: RandomSource,
    config: Optional[GeneratorConfig] = None,
) -> str:
    """Generate one password; raises a :class:`GenerationError` subclass on failure."""

    return PasswordGenerator(word_list, random_source, config).generate(constraints)
