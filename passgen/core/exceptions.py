"""Custom exception hierarchy for password generation."""


class PassgenError(Exception):
    """Base exception for generator failures."""


class GenerationError(PassgenError):
    """Raised when a password cannot be produced for the given constraints."""


class NoCharacterClassSelected(GenerationError):
    """Raised when letters, capitals, numbers and symbols are all disallowed."""


class WordListUnavailable(GenerationError):
    """Raised when letters are requested but the word list is empty."""


class ConstraintsUnsatisfiable(GenerationError):
    """Raised when no word matching the constraints was drawn within the attempt cap."""


class WordListLoadError(PassgenError):
    """Raised when the word list cannot be retrieved or decoded."""
