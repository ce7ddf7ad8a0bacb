"""CLI entrypoint for the password generator."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from passgen.core.constants import DEFAULT_MAX_WORD_ATTEMPTS, DEFAULT_TIMEOUT_SECONDS, WORDLIST_URL_ENV, SeparatorMode
from passgen.core.exceptions import PassgenError
from passgen.core.models import Constraints
from passgen.data.wordlist import WordList, WordListConfig, load_word_list
from passgen.engine.generator import GeneratorConfig, PasswordGenerator
from passgen.engine.random_source import create_random_source
from passgen.utils.logger import configure_logging, get_logger
from passgen.utils.pretty import INSECURE_SOURCE_WARNING, print_password_stats

LOGGER = get_logger("passgen.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate passwords and passphrases from dictionary words or symbol alphabets",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="Word list with one candidate word per line",
    )
    source.add_argument(
        "--words-url",
        type=str,
        metavar="URL",
        help=f"Fetch the word list over HTTP (defaults to ${WORDLIST_URL_ENV} when set)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="HTTP timeout in seconds for --words-url",
    )
    parser.add_argument("--count", type=int, default=None, help="Number of items (default 6)")
    parser.add_argument("--max-len", type=int, default=None, help="Truncate the password to this length")
    parser.add_argument(
        "--separator",
        type=str,
        choices=[mode.value for mode in SeparatorMode],
        default=SeparatorMode.SPACE.value,
        help="Separator placed between items",
    )
    parser.add_argument("--no-letters", action="store_true", help="Disallow lower-case letters")
    parser.add_argument("--capitals", action="store_true", help="Allow capital letters")
    parser.add_argument("--must-capitals", action="store_true", help="Randomize the case of every letter")
    parser.add_argument("--numbers", action="store_true", help="Allow digits")
    parser.add_argument("--must-numbers", action="store_true", help="Require a digit in every item")
    parser.add_argument("--symbols", action="store_true", help="Allow symbols")
    parser.add_argument("--must-symbols", action="store_true", help="Require a symbol in every item")
    parser.add_argument(
        "--xml-safe",
        action="store_true",
        help="Leave out the characters < > & \" ' from the symbol alphabet",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility (not secure)")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_WORD_ATTEMPTS,
        help="Maximum word draws per item before giving up",
    )
    parser.add_argument("--stats", action="store_true", help="Print how the password was built")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def constraints_from_args(args: argparse.Namespace) -> Constraints:
    return Constraints(
        may_letters=not args.no_letters,
        must_capitals=args.must_capitals,
        may_capitals=args.capitals,
        may_numbers=args.numbers,
        must_numbers=args.must_numbers,
        may_symbols=args.symbols,
        must_symbols=args.must_symbols,
        xml_safe=args.xml_safe,
        count=args.count,
        max_len=args.max_len,
        separator=SeparatorMode(args.separator),
    )


def resolve_word_list(args: argparse.Namespace) -> WordList:
    """Load the requested word list, or an empty one when none is configured."""
    if args.words_file is None and not args.words_url and not os.environ.get(WORDLIST_URL_ENV):
        LOGGER.info("No word list configured; only synthetic items can be generated")
        return WordList([])
    config = WordListConfig(
        path=args.words_file,
        url=args.words_url,
        timeout_seconds=args.timeout,
    )
    return load_word_list(config)


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")

    constraints = constraints_from_args(args)
    random_source = create_random_source(args.seed)

    try:
        word_list = resolve_word_list(args)
        generator = PasswordGenerator(
            word_list,
            random_source,
            GeneratorConfig(max_word_attempts=args.max_attempts),
        )
        result = generator.generate_result(constraints)
    except PassgenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.output:
        payload: Dict[str, Any] = {
            "password": result.password,
            "length": len(result.password),
            "items": [
                {"text": item.text, "source": item.source.value, "separator": item.separator}
                for item in result.items
            ],
            "cryptographic": result.cryptographic,
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    elif args.stats:
        print_password_stats(result, word_list)
    else:
        print(result.password)

    if not result.cryptographic and not args.stats:
        print(INSECURE_SOURCE_WARNING, file=sys.stderr)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
