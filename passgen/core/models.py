"""Data models supporting the password generator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional

from .constants import DEFAULT_COUNT, ItemSource, SeparatorMode

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# camelCase keys used by form-style configuration objects
_FIELD_ALIASES = {
    "mayLetters": "may_letters",
    "mustCapitals": "must_capitals",
    "mayCapitals": "may_capitals",
    "mayNumbers": "may_numbers",
    "mustNumbers": "must_numbers",
    "maySymbols": "may_symbols",
    "mustSymbols": "must_symbols",
    "xmlSafe": "xml_safe",
    "maxLen": "max_len",
}

_FLAG_FIELDS = (
    "may_letters",
    "must_capitals",
    "may_capitals",
    "may_numbers",
    "must_numbers",
    "may_symbols",
    "must_symbols",
    "xml_safe",
)


def parse_flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    normalized = str(value).strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def parse_int(value: Any) -> Optional[int]:
    """Parse ``value`` the way a form's integer field would.

    Integers pass through, strings contribute their leading integer prefix
    (``"12abc"`` gives 12), integral floats are accepted and anything else
    is treated as unset.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or not value.is_integer():
            return None
        return int(value)
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_separator(value: Any) -> SeparatorMode:
    if isinstance(value, SeparatorMode):
        return value
    if value is None:
        return SeparatorMode.SPACE
    try:
        return SeparatorMode(str(value).strip().lower())
    except ValueError:
        # unknown radio values behaved like "none"
        return SeparatorMode.NONE


@dataclass(frozen=True)
class Constraints:
    """Character-class and layout options selected by the caller."""

    may_letters: bool = True
    must_capitals: bool = False
    may_capitals: bool = False
    may_numbers: bool = False
    must_numbers: bool = False
    may_symbols: bool = False
    must_symbols: bool = False
    xml_safe: bool = False
    count: Optional[int] = DEFAULT_COUNT
    max_len: Optional[int] = None
    separator: SeparatorMode = SeparatorMode.SPACE

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Constraints":
        """Build constraints from a flat configuration object.

        Keys may use either camelCase (``mayLetters``) or snake_case
        (``may_letters``). Missing flags are false, which differs from the
        dataclass defaults on purpose: an unticked box is absent from a form.
        """

        values = {_FIELD_ALIASES.get(key, key): raw for key, raw in mapping.items()}
        kwargs: dict[str, Any] = {name: parse_flag(values.get(name)) for name in _FLAG_FIELDS}
        kwargs["count"] = parse_int(values.get("count"))
        kwargs["max_len"] = parse_int(values.get("max_len"))
        kwargs["separator"] = parse_separator(values.get("separator"))
        return cls(**kwargs)

    @property
    def has_any_class(self) -> bool:
        return self.may_letters or self.may_capitals or self.may_numbers or self.may_symbols

    @property
    def uses_words(self) -> bool:
        return self.may_letters or self.may_capitals

    def resolved_count(self) -> int:
        count = self.count
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            return DEFAULT_COUNT
        return count

    def normalized(self) -> "Constraints":
        """Return a copy with the implied options applied.

        A required class is always allowed, the symbol separator needs
        symbols, and a negative ``max_len`` behaves like 0.
        """

        may_symbols = self.may_symbols or self.must_symbols
        separator = self.separator
        if separator == SeparatorMode.SYMBOL and not may_symbols:
            separator = SeparatorMode.SPACE
        max_len = self.max_len
        if max_len is not None and max_len < 0:
            max_len = 0
        return replace(
            self,
            may_capitals=self.may_capitals or self.must_capitals,
            may_numbers=self.may_numbers or self.must_numbers,
            may_symbols=may_symbols,
            count=self.resolved_count(),
            max_len=max_len,
            separator=separator,
        )


@dataclass
class GeneratedItem:
    """One word or token occupying a single position of the password."""

    text: str
    source: ItemSource
    separator: str = ""

    def render(self) -> str:
        return self.text + self.separator


@dataclass
class PasswordResult:
    password: str
    items: List[GeneratedItem] = field(default_factory=list)
    untruncated: str = ""
    cryptographic: bool = False

    @property
    def truncated(self) -> bool:
        return len(self.password) < len(self.untruncated)


@dataclass
class GenerationOutcome:
    """Discriminated result for callers that do not want exceptions."""

    ok: bool
    password: Optional[str] = None
    error: Optional[Exception] = None
