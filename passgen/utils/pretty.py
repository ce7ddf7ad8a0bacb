"""Pretty-print helpers for generated passwords."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.models import PasswordResult
    from ..data.wordlist import WordList


INSECURE_SOURCE_WARNING = (
    "WARNING: no cryptographically strong random source is available; "
    "this password was produced by a pseudo-random generator."
)


def format_items(result: PasswordResult) -> str:
    lines = []
    for index, item in enumerate(result.items, start=1):
        sep = repr(item.separator) if item.separator else "-"
        lines.append(f"  {index:>2}. {item.text:<20} ({item.source.value}, sep {sep})")
    return "\n".join(lines)


def print_password_stats(
    result: PasswordResult,
    word_list: Optional[WordList] = None,
    *,
    stream=None,
) -> None:
    """Print the password followed by a breakdown of how it was built."""

    stream = stream or sys.stdout
    print(result.password, file=stream)

    print(file=stream)
    print("--- Items ---", file=stream)
    print(format_items(result), file=stream)

    sources = Counter(item.source.value for item in result.items)
    print(file=stream)
    print("--- Length ---", file=stream)
    print(f"  Items:         {len(result.items)} ({', '.join(f'{k}: {v}' for k, v in sorted(sources.items()))})", file=stream)
    print(f"  Untruncated:   {len(result.untruncated)}", file=stream)
    if result.truncated:
        print(f"  Truncated to:  {len(result.password)}", file=stream)

    if word_list is not None:
        print(file=stream)
        print("--- Word list ---", file=stream)
        print(f"  Entries:       {len(word_list)}", file=stream)
        print(f"  Avg length:    {word_list.average_length:.2f}", file=stream)

    if not result.cryptographic:
        print(file=stream)
        print(INSECURE_SOURCE_WARNING, file=stream)
