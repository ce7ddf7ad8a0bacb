import unittest
from unittest.mock import patch

from passgen.engine.random_source import (
    ReplayRandomSource,
    SeededRandomSource,
    SystemRandomSource,
    create_random_source,
)


class SystemRandomSourceTests(unittest.TestCase):
    def test_prefers_os_entropy(self) -> None:
        source = SystemRandomSource()
        self.assertTrue(source.cryptographic)
        for _ in range(200):
            self.assertIn(source.next_uniform(7), range(7))

    def test_falls_back_without_os_entropy(self) -> None:
        with patch("passgen.engine.random_source.os.urandom", side_effect=NotImplementedError):
            source = SystemRandomSource()
        self.assertFalse(source.cryptographic)
        self.assertIn(source.next_uniform(3), range(3))

    def test_rejects_non_positive_bounds(self) -> None:
        source = SystemRandomSource()
        for bound in (0, -1, True, 2.0):
            with self.assertRaises(ValueError):
                source.next_uniform(bound)

    def test_bound_of_one_always_zero(self) -> None:
        source = SystemRandomSource()
        self.assertEqual({source.next_uniform(1) for _ in range(20)}, {0})


class SeededRandomSourceTests(unittest.TestCase):
    def test_same_seed_same_sequence(self) -> None:
        first = SeededRandomSource(99)
        second = SeededRandomSource(99)
        self.assertEqual(
            [first.next_uniform(1000) for _ in range(20)],
            [second.next_uniform(1000) for _ in range(20)],
        )
        self.assertFalse(first.cryptographic)


class ReplayRandomSourceTests(unittest.TestCase):
    def test_replays_cyclically(self) -> None:
        source = ReplayRandomSource([0, 1, 2])
        self.assertEqual([source.next_uniform(10) for _ in range(5)], [0, 1, 2, 0, 1])
        self.assertEqual(source.draws, 5)

    def test_values_reduced_modulo_bound(self) -> None:
        source = ReplayRandomSource([7])
        self.assertEqual(source.next_uniform(5), 2)

    def test_requires_values(self) -> None:
        with self.assertRaises(ValueError):
            ReplayRandomSource([])
        with self.assertRaises(ValueError):
            ReplayRandomSource([1, -1])


class FactoryTests(unittest.TestCase):
    def test_seed_selects_seeded_source(self) -> None:
        self.assertIsInstance(create_random_source(5), SeededRandomSource)

    def test_no_seed_selects_system_source(self) -> None:
        self.assertIsInstance(create_random_source(), SystemRandomSource)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
