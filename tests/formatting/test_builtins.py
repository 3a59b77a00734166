"""Tests for the built-in formatters."""

import uuid
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import Enum, IntEnum

import pytest

from formbind.formatting.builtins import (
    BooleanFormatter,
    CurrencyFormatter,
    DateFormatter,
    DateTimeFormatter,
    DecimalFormatter,
    EnumFormatter,
    FloatFormatter,
    IntegerFormatter,
    PercentFormatter,
    StringFormatter,
    TimeFormatter,
    UUIDFormatter,
    default_formatters,
)


class Color(Enum):
    RED = "r"
    GREEN = "g"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


class TestStringFormatter:
    def test_passthrough(self) -> None:
        assert StringFormatter().parse("  keep me ") == "  keep me "

    def test_format_none(self) -> None:
        assert StringFormatter().format(None) == ""  # type: ignore[arg-type]


class TestIntegerFormatter:
    def test_parse(self) -> None:
        assert IntegerFormatter().parse(" 42 ") == 42

    def test_grouping_accepted(self) -> None:
        assert IntegerFormatter().parse("1,250") == 1250

    def test_fraction_rejected(self) -> None:
        with pytest.raises(ValueError):
            IntegerFormatter().parse("1.5")

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError):
            IntegerFormatter().parse("abc")

    def test_format_grouped(self) -> None:
        assert IntegerFormatter(grouping=True).format(1234567) == "1,234,567"
        assert IntegerFormatter(grouping_separator=".", grouping=True).format(1234) == "1.234"

    def test_format_plain(self) -> None:
        assert IntegerFormatter().format(1234) == "1234"


class TestFloatFormatter:
    def test_parse(self) -> None:
        assert FloatFormatter().parse("2.5") == 2.5

    def test_rejects_text(self) -> None:
        with pytest.raises(ValueError):
            FloatFormatter().parse("two")


class TestDecimalFormatter:
    def test_parse(self) -> None:
        assert DecimalFormatter().parse("10.25") == Decimal("10.25")

    def test_places_quantize(self) -> None:
        assert DecimalFormatter(places=1).parse("10.25") == Decimal("10.2")

    def test_invalid(self) -> None:
        with pytest.raises(InvalidOperation):
            DecimalFormatter().parse("ten")

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            DecimalFormatter().parse("NaN")

    def test_format_grouped(self) -> None:
        assert DecimalFormatter(places=2, grouping=True).format(Decimal("1234.5")) == "1,234.50"


class TestBooleanFormatter:
    @pytest.mark.parametrize("text", ["true", "ON", "Yes", "1"])
    def test_true_words(self, text: str) -> None:
        assert BooleanFormatter().parse(text) is True

    @pytest.mark.parametrize("text", ["false", "off", "NO", "0"])
    def test_false_words(self, text: str) -> None:
        assert BooleanFormatter().parse(text) is False

    def test_custom_words(self) -> None:
        fmt = BooleanFormatter(true_values=["ja"], false_values=["nein"])
        assert fmt.parse("JA") is True
        with pytest.raises(ValueError):
            fmt.parse("yes")

    def test_unknown_word(self) -> None:
        with pytest.raises(ValueError):
            BooleanFormatter().parse("maybe")


class TestTemporalFormatters:
    def test_iso_date(self) -> None:
        assert DateFormatter().parse("2024-03-01") == date(2024, 3, 1)

    def test_patterned_date(self) -> None:
        fmt = DateFormatter("%d/%m/%Y")
        assert fmt.parse("01/03/2024") == date(2024, 3, 1)
        assert fmt.format(date(2024, 3, 1)) == "01/03/2024"

    def test_bad_date(self) -> None:
        with pytest.raises(ValueError):
            DateFormatter().parse("2024-13-01")

    def test_datetime(self) -> None:
        assert DateTimeFormatter().parse("2024-03-01T10:30:00") == datetime(2024, 3, 1, 10, 30)

    def test_time_pattern(self) -> None:
        assert TimeFormatter("%H.%M").parse("09.15") == time(9, 15)


class TestUUIDFormatter:
    def test_roundtrip(self) -> None:
        value = uuid.UUID("12345678-1234-5678-1234-567812345678")
        fmt = UUIDFormatter()
        assert fmt.parse(str(value)) == value
        assert fmt.format(value) == str(value)

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            UUIDFormatter().parse("not-a-uuid")


class TestEnumFormatter:
    def test_by_name(self) -> None:
        assert EnumFormatter(Color).parse("RED") is Color.RED

    def test_by_value(self) -> None:
        assert EnumFormatter(Color).parse("g") is Color.GREEN

    def test_case_insensitive_name(self) -> None:
        assert EnumFormatter(Color).parse("green") is Color.GREEN

    def test_int_enum_value(self) -> None:
        assert EnumFormatter(Priority).parse("2") is Priority.HIGH

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            EnumFormatter(Color).parse("BLUE")

    def test_format_uses_name(self) -> None:
        assert EnumFormatter(Color).format(Color.RED) == "RED"


class TestCurrencyFormatter:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$1,234.5", Decimal("1234.50")),
            ("1234.567", Decimal("1234.57")),
            ("-$5", Decimal("-5.00")),
            ("12$", Decimal("12.00")),
        ],
    )
    def test_parse(self, text: str, expected: Decimal) -> None:
        assert CurrencyFormatter().parse(text) == expected

    def test_misplaced_sign(self) -> None:
        with pytest.raises(ValueError):
            CurrencyFormatter().parse("$-5")

    def test_format(self) -> None:
        assert CurrencyFormatter().format(Decimal("1234.5")) == "$1,234.50"
        assert CurrencyFormatter(symbol="€").format(Decimal("-3")) == "-€3.00"


class TestPercentFormatter:
    def test_parse_with_sign(self) -> None:
        assert PercentFormatter().parse("25%") == Decimal("0.25")

    def test_parse_without_sign(self) -> None:
        assert PercentFormatter().parse("12.5") == Decimal("0.125")

    def test_format(self) -> None:
        assert PercentFormatter().format(Decimal("0.25")) == "25%"


class TestDefaultFormatters:
    def test_covers_scalar_types(self) -> None:
        formatters = default_formatters()
        assert {str, int, float, Decimal, bool, date, datetime, time, uuid.UUID} <= set(formatters)

    def test_patterns_are_applied(self) -> None:
        formatters = default_formatters(date_pattern="%d.%m.%Y")
        assert formatters[date].parse("01.03.2024") == date(2024, 3, 1)
