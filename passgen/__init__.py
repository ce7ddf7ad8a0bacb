"""Configurable password and passphrase generator.

This package exposes the public API surface via:

- ``passgen.engine.generator.PasswordGenerator``: builds passwords from constraints.
- ``passgen.data.wordlist.WordList``: loads the candidate dictionary words.
- ``passgen.engine.random_source``: entropy providers, seeded and replayable sources.
"""

from .core.constants import SeparatorMode
from .core.exceptions import (
    ConstraintsUnsatisfiable,
    GenerationError,
    NoCharacterClassSelected,
    PassgenError,
    WordListLoadError,
    WordListUnavailable,
)
from .core.models import Constraints, PasswordResult
from .data.wordlist import WordList, WordListConfig, load_word_list
from .engine.generator import GeneratorConfig, PasswordGenerator, generate_password
from .engine.random_source import (
    RandomSource,
    ReplayRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    create_random_source,
)

__all__ = [
    "Constraints",
    "ConstraintsUnsatisfiable",
    "GenerationError",
    "GeneratorConfig",
    "NoCharacterClassSelected",
    "PassgenError",
    "PasswordGenerator",
    "PasswordResult",
    "RandomSource",
    "ReplayRandomSource",
    "SeededRandomSource",
    "SeparatorMode",
    "SystemRandomSource",
    "WordList",
    "WordListConfig",
    "WordListLoadError",
    "WordListUnavailable",
    "create_random_source",
    "generate_password",
    "load_word_list",
]

__version__ = "0.1.0"
