"""Formatting markers and the factories that turn them into Formatters.

Markers are plain frozen dataclasses placed in ``Annotated`` metadata::

    @dataclass
    class Invoice:
        issued: Annotated[date, DateFormat("%d/%m/%Y")]
        total: Annotated[Decimal, CurrencyFormat(symbol="€")]
        discount: Annotated[Decimal, PercentFormat()]
        units: Annotated[int, NumberFormat(grouping=True)]

A marker-driven formatter always takes precedence over the formatter
registered for the plain property type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from formbind.domain.typeinfo import TypeDescriptor
from formbind.formatting.base import AnnotationFormatterFactory, Formatter
from formbind.formatting.builtins import (
    CurrencyFormatter,
    DateFormatter,
    DateTimeFormatter,
    DecimalFormatter,
    FloatFormatter,
    IntegerFormatter,
    PercentFormatter,
    TimeFormatter,
)

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DateFormat:
    """``strptime``/``strftime`` pattern for date, datetime, or time properties."""

    pattern: str


@dataclass(frozen=True)
class NumberFormat:
    places: int | None = None
    grouping: bool = False


@dataclass(frozen=True)
class CurrencyFormat:
    """Money amounts. Unset fields use the registry's configured currency."""

    symbol: str | None = None
    places: int | None = None


@dataclass(frozen=True)
class PercentFormat:
    places: int | None = None


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def _require_decimal(marker: str, descriptor: TypeDescriptor) -> None:
    if not issubclass(descriptor.type, Decimal):
        raise TypeError(f"{marker} cannot format {descriptor.name}")


class DateFormatFactory(AnnotationFormatterFactory[DateFormat]):
    @property
    def marker_type(self) -> type[DateFormat]:
        return DateFormat

    def get_formatter(self, marker: DateFormat, descriptor: TypeDescriptor) -> Formatter[Any]:
        # datetime subclasses date, so it is checked first.
        if issubclass(descriptor.type, datetime):
            return DateTimeFormatter(marker.pattern)
        if issubclass(descriptor.type, time):
            return TimeFormatter(marker.pattern)
        if issubclass(descriptor.type, date):
            return DateFormatter(marker.pattern)
        raise TypeError(f"DateFormat cannot format {descriptor.name}")


class NumberFormatFactory(AnnotationFormatterFactory[NumberFormat]):
    def __init__(self, *, grouping_separator: str | None = ",") -> None:
        self.grouping_separator = grouping_separator

    @property
    def marker_type(self) -> type[NumberFormat]:
        return NumberFormat

    def get_formatter(self, marker: NumberFormat, descriptor: TypeDescriptor) -> Formatter[Any]:
        if issubclass(descriptor.type, bool):
            raise TypeError("NumberFormat cannot format bool")
        if issubclass(descriptor.type, int):
            return IntegerFormatter(
                grouping_separator=self.grouping_separator, grouping=marker.grouping
            )
        if issubclass(descriptor.type, float):
            return FloatFormatter(grouping_separator=self.grouping_separator)
        return DecimalFormatter(
            places=marker.places,
            grouping_separator=self.grouping_separator,
            grouping=marker.grouping,
        )


class CurrencyFormatFactory(AnnotationFormatterFactory[CurrencyFormat]):
    def __init__(
        self, *, symbol: str = "$", places: int = 2, grouping_separator: str = ","
    ) -> None:
        self.symbol = symbol
        self.places = places
        self.grouping_separator = grouping_separator

    @property
    def marker_type(self) -> type[CurrencyFormat]:
        return CurrencyFormat

    def get_formatter(self, marker: CurrencyFormat, descriptor: TypeDescriptor) -> Formatter[Any]:
        _require_decimal("CurrencyFormat", descriptor)
        return CurrencyFormatter(
            symbol=self.symbol if marker.symbol is None else marker.symbol,
            places=self.places if marker.places is None else marker.places,
            grouping_separator=self.grouping_separator,
        )


class PercentFormatFactory(AnnotationFormatterFactory[PercentFormat]):
    @property
    def marker_type(self) -> type[PercentFormat]:
        return PercentFormat

    def get_formatter(self, marker: PercentFormat, descriptor: TypeDescriptor) -> Formatter[Any]:
        _require_decimal("PercentFormat", descriptor)
        return PercentFormatter(places=marker.places)
