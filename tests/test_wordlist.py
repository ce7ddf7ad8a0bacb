import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from passgen.core.constants import WORDLIST_URL_ENV
from passgen.core.exceptions import WordListLoadError
from passgen.data.wordlist import WordList, WordListConfig, load_word_list
from passgen.io.wordlist_client import WordListClient


def fake_response(text: str) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.raise_for_status.return_value = None
    return response


class WordListTextTests(unittest.TestCase):
    def test_every_line_is_a_word(self) -> None:
        word_list = WordList.from_text("apple\nbanana\n")
        self.assertEqual(list(word_list), ["apple", "banana", ""])
        self.assertEqual(len(word_list), 3)
        self.assertEqual(word_list[1], "banana")

    def test_average_length_counts_blank_segments(self) -> None:
        word_list = WordList.from_text("apple\nbanana\n")
        self.assertAlmostEqual(word_list.average_length, 11 / 3)

    def test_crlf_line_endings(self) -> None:
        word_list = WordList.from_text("apple\r\nbanana")
        self.assertEqual(list(word_list), ["apple", "banana"])
        self.assertAlmostEqual(word_list.average_length, 5.5)

    def test_empty_source_is_empty_list(self) -> None:
        word_list = WordList.from_text("")
        self.assertTrue(word_list.is_empty())
        self.assertEqual(word_list.average_length, 0.0)

    def test_words_are_immutable(self) -> None:
        source = ["apple"]
        word_list = WordList(source)
        source.append("banana")
        self.assertEqual(len(word_list), 1)
        self.assertIsInstance(word_list.words, tuple)


class WordListFileTests(unittest.TestCase):
    def test_from_path_reads_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("abacus\nzebră\n", encoding="utf-8")
            word_list = WordList.from_path(sample)
            self.assertEqual(word_list.words[:2], ("abacus", "zebră"))

    def test_missing_file_is_load_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(WordListLoadError):
                WordList.from_path(Path(tmpdir) / "missing.txt")

    def test_load_word_list_prefers_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("one\ntwo", encoding="utf-8")
            with patch("passgen.io.wordlist_client.requests.get") as get:
                word_list = load_word_list(WordListConfig(path=sample, url="http://example.invalid/w"))
            get.assert_not_called()
            self.assertEqual(list(word_list), ["one", "two"])


class WordListClientTests(unittest.TestCase):
    def test_fetch_over_http(self) -> None:
        with patch("passgen.io.wordlist_client.requests.get", return_value=fake_response("cat\ndog")) as get:
            word_list = WordList.from_url("http://example.invalid/js/dicelist.txt", timeout_seconds=3.0)
        get.assert_called_once_with("http://example.invalid/js/dicelist.txt", timeout=3.0)
        self.assertEqual(list(word_list), ["cat", "dog"])

    def test_transport_failure_is_load_error(self) -> None:
        with patch(
            "passgen.io.wordlist_client.requests.get",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with self.assertRaises(WordListLoadError) as ctx:
                WordList.from_url("http://example.invalid/words")
        self.assertIn("connection refused", str(ctx.exception))

    def test_http_error_is_load_error(self) -> None:
        response = fake_response("")
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        with patch("passgen.io.wordlist_client.requests.get", return_value=response):
            with self.assertRaises(WordListLoadError):
                WordList.from_url("http://example.invalid/words")

    def test_url_from_environment(self) -> None:
        with patch.dict(os.environ, {WORDLIST_URL_ENV: "http://example.invalid/env"}):
            client = WordListClient()
        self.assertEqual(client.url, "http://example.invalid/env")

    def test_missing_url_is_load_error(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(WordListLoadError):
                load_word_list(WordListConfig())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
