"""Built-in formatters for the standard scalar types.

All formatters strip surrounding whitespace before parsing. Number
formatters accept the configured grouping separator (``"1,250"``).
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import date, datetime, time
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import Any, Generic, TypeVar

from formbind.formatting.base import Formatter

E = TypeVar("E", bound=Enum)

DEFAULT_TRUE_VALUES: tuple[str, ...] = ("true", "on", "yes", "1")
DEFAULT_FALSE_VALUES: tuple[str, ...] = ("false", "off", "no", "0")


def _ungroup(text: str, separator: str | None) -> str:
    text = text.strip()
    if separator:
        text = text.replace(separator, "")
    return text


def _group(rendered: str, separator: str) -> str:
    """Swap Python's ``,`` grouping for *separator*."""
    return rendered.replace(",", separator) if separator != "," else rendered


def _quantize(value: Decimal, places: int | None) -> Decimal:
    if places is None:
        return value
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def _to_decimal(text: str) -> Decimal:
    value = Decimal(text)
    if not value.is_finite():
        raise ValueError(f"'{text}' is not a finite number")
    return value


class StringFormatter(Formatter[str]):
    def parse(self, text: str) -> str:
        return text

    def format(self, value: str) -> str:
        return "" if value is None else str(value)


class IntegerFormatter(Formatter[int]):
    """Whole numbers. Rejects fractional input such as ``"1.5"``."""

    def __init__(self, *, grouping_separator: str | None = ",", grouping: bool = False) -> None:
        self.grouping_separator = grouping_separator
        self.grouping = grouping

    def parse(self, text: str) -> int:
        return int(_ungroup(text, self.grouping_separator))

    def format(self, value: int) -> str:
        if self.grouping and self.grouping_separator:
            return _group(f"{value:,}", self.grouping_separator)
        return str(value)


class FloatFormatter(Formatter[float]):
    def __init__(self, *, grouping_separator: str | None = ",") -> None:
        self.grouping_separator = grouping_separator

    def parse(self, text: str) -> float:
        return float(_ungroup(text, self.grouping_separator))

    def format(self, value: float) -> str:
        return repr(value)


class DecimalFormatter(Formatter[Decimal]):
    """Decimal numbers, optionally quantized to a fixed number of places."""

    def __init__(
        self,
        *,
        places: int | None = None,
        grouping_separator: str | None = ",",
        grouping: bool = False,
    ) -> None:
        self.places = places
        self.grouping_separator = grouping_separator
        self.grouping = grouping

    def parse(self, text: str) -> Decimal:
        return _quantize(_to_decimal(_ungroup(text, self.grouping_separator)), self.places)

    def format(self, value: Decimal) -> str:
        value = _quantize(Decimal(value), self.places)
        if self.grouping and self.grouping_separator:
            return _group(f"{value:,f}", self.grouping_separator)
        return f"{value:f}"


class BooleanFormatter(Formatter[bool]):
    """Case-insensitive booleans from configurable true/false words."""

    def __init__(
        self,
        *,
        true_values: Iterable[str] = DEFAULT_TRUE_VALUES,
        false_values: Iterable[str] = DEFAULT_FALSE_VALUES,
    ) -> None:
        self.true_values = frozenset(v.lower() for v in true_values)
        self.false_values = frozenset(v.lower() for v in false_values)

    def parse(self, text: str) -> bool:
        word = text.strip().lower()
        if word in self.true_values:
            return True
        if word in self.false_values:
            return False
        raise ValueError(f"'{text}' is not a boolean")

    def format(self, value: bool) -> str:
        return "true" if value else "false"


class DateFormatter(Formatter[date]):
    """Dates in ISO-8601 form, or with a ``strptime`` *pattern*."""

    def __init__(self, pattern: str | None = None) -> None:
        self.pattern = pattern

    def parse(self, text: str) -> date:
        text = text.strip()
        if self.pattern is None:
            return date.fromisoformat(text)
        return datetime.strptime(text, self.pattern).date()

    def format(self, value: date) -> str:
        return value.isoformat() if self.pattern is None else value.strftime(self.pattern)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"


class DateTimeFormatter(DateFormatter):
    def parse(self, text: str) -> datetime:  # type: ignore[override]
        text = text.strip()
        if self.pattern is None:
            return datetime.fromisoformat(text)
        return datetime.strptime(text, self.pattern)


class TimeFormatter(DateFormatter):
    def parse(self, text: str) -> time:  # type: ignore[override]
        text = text.strip()
        if self.pattern is None:
            return time.fromisoformat(text)
        return datetime.strptime(text, self.pattern).time()


class UUIDFormatter(Formatter[uuid.UUID]):
    def parse(self, text: str) -> uuid.UUID:
        return uuid.UUID(text.strip())

    def format(self, value: uuid.UUID) -> str:
        return str(value)


class EnumFormatter(Formatter[E], Generic[E]):
    """Enum members by name, then by value, then by case-insensitive name."""

    def __init__(self, enum_type: type[E]) -> None:
        self.enum_type = enum_type

    def parse(self, text: str) -> E:
        text = text.strip()
        members = self.enum_type.__members__
        if text in members:
            return members[text]
        for member in self.enum_type:
            if str(member.value) == text:
                return member
        folded = text.casefold()
        for name, member in members.items():
            if name.casefold() == folded:
                return member
        raise ValueError(f"'{text}' is not a valid {self.enum_type.__name__}")

    def format(self, value: E) -> str:
        return value.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.enum_type.__name__})"


class CurrencyFormatter(Formatter[Decimal]):
    """Monetary amounts such as ``"$1,234.5"`` -> ``Decimal("1234.50")``.

    The currency symbol is optional on input and may lead or trail.
    """

    def __init__(
        self,
        *,
        symbol: str = "$",
        places: int = 2,
        grouping_separator: str = ",",
    ) -> None:
        self.symbol = symbol
        self.places = places
        self.grouping_separator = grouping_separator

    def parse(self, text: str) -> Decimal:
        text = text.strip()
        negative = text.startswith("-")
        if negative:
            text = text[1:].strip()
        if self.symbol:
            text = text.removeprefix(self.symbol).removesuffix(self.symbol)
        amount = _to_decimal(_ungroup(text, self.grouping_separator))
        if amount.is_signed():
            raise ValueError(f"'{text}' has a misplaced sign")
        return _quantize(-amount if negative else amount, self.places)

    def format(self, value: Decimal) -> str:
        value = _quantize(Decimal(value), self.places)
        sign = "-" if value.is_signed() else ""
        rendered = _group(f"{abs(value):,.{self.places}f}", self.grouping_separator)
        return f"{sign}{self.symbol}{rendered}"


class PercentFormatter(Formatter[Decimal]):
    """Percentages: ``"25%"`` and ``"25"`` both parse to ``Decimal("0.25")``."""

    def __init__(self, *, places: int | None = None) -> None:
        self.places = places

    def parse(self, text: str) -> Decimal:
        text = text.strip().removesuffix("%").strip()
        return _quantize(_to_decimal(text), self.places) / 100

    def format(self, value: Decimal) -> str:
        percent = _quantize(Decimal(value) * 100, self.places)
        return f"{percent.normalize():f}%"


def default_formatters(
    *,
    date_pattern: str | None = None,
    datetime_pattern: str | None = None,
    time_pattern: str | None = None,
    true_values: Iterable[str] = DEFAULT_TRUE_VALUES,
    false_values: Iterable[str] = DEFAULT_FALSE_VALUES,
    grouping_separator: str | None = ",",
) -> dict[type, Formatter[Any]]:
    """Type -> Formatter map installed into every default registry."""
    return {
        str: StringFormatter(),
        int: IntegerFormatter(grouping_separator=grouping_separator),
        float: FloatFormatter(grouping_separator=grouping_separator),
        Decimal: DecimalFormatter(grouping_separator=grouping_separator),
        bool: BooleanFormatter(true_values=true_values, false_values=false_values),
        date: DateFormatter(date_pattern),
        datetime: DateTimeFormatter(datetime_pattern),
        time: TimeFormatter(time_pattern),
        uuid.UUID: UUIDFormatter(),
    }
