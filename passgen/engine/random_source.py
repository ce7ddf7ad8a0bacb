"""Sources of uniform random integers used by the generator."""

from __future__ import annotations

import os
import random
from itertools import cycle
from typing import Iterable, Optional, Protocol

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class RandomSource(Protocol):
    """Protocol implemented by all entropy providers."""

    @property
    def cryptographic(self) -> bool:
        ...

    def next_uniform(self, max_exclusive: int) -> int:
        """Return an integer uniformly distributed in ``[0, max_exclusive)``."""
        ...


def _check_bound(max_exclusive: int) -> None:
    if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int) or max_exclusive < 1:
        raise ValueError(f"max_exclusive must be a positive integer, got {max_exclusive!r}")


def _os_entropy_available() -> bool:
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


class SystemRandomSource:
    """Operating-system entropy, degrading to a pseudo-random generator.

    ``cryptographic`` is False when the platform offers no entropy source;
    callers are expected to surface that to the user.
    """

    def __init__(self) -> None:
        self._cryptographic = _os_entropy_available()
        if self._cryptographic:
            self._rng: random.Random = random.SystemRandom()
        else:
            LOGGER.warning("No OS entropy source available; falling back to a pseudo-random generator")
            self._rng = random.Random()

    @property
    def cryptographic(self) -> bool:
        return self._cryptographic

    def next_uniform(self, max_exclusive: int) -> int:
        _check_bound(max_exclusive)
        return self._rng.randrange(max_exclusive)


class SeededRandomSource:
    """Reproducible source backed by ``random.Random(seed)``."""

    def __init__(self, seed: int | str | None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    @property
    def cryptographic(self) -> bool:
        return False

    def next_uniform(self, max_exclusive: int) -> int:
        _check_bound(max_exclusive)
        return self._rng.randrange(max_exclusive)


class ReplayRandomSource:
    """Replays a fixed sequence of draws, cycling when exhausted.

    Each value is reduced modulo ``max_exclusive`` so any replay stays in range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        if not self.values:
            raise ValueError("ReplayRandomSource needs at least one value")
        if any(value < 0 for value in self.values):
            raise ValueError("ReplayRandomSource values must be non-negative")
        self._iterator = cycle(self.values)
        self.draws = 0

    @property
    def cryptographic(self) -> bool:
        return False

    def next_uniform(self, max_exclusive: int) -> int:
        _check_bound(max_exclusive)
        self.draws += 1
        return next(self._iterator) % max_exclusive


def create_random_source(seed: Optional[int] = None) -> RandomSource:
    """Return a seeded source when ``seed`` is given, OS entropy otherwise."""

    if seed is not None:
        LOGGER.info("Using seeded pseudo-random source (seed=%s)", seed)
        return SeededRandomSource(seed)
    return SystemRandomSource()
