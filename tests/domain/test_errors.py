"""Tests for the binding error hierarchy."""

from decimal import Decimal

from formbind.domain.errors import (
    BindingError,
    ConversionError,
    InvalidPropertyPathError,
    PropertyAccessError,
    UnboundPropertyError,
    UnresolvedFormatterError,
)


class TestErrors:
    def test_all_derive_from_binding_error(self) -> None:
        for exc in (
            InvalidPropertyPathError("a", "b"),
            UnboundPropertyError("a"),
            UnresolvedFormatterError(int),
            ConversionError("a", "x", "bad"),
            PropertyAccessError("a", "nope"),
        ):
            assert isinstance(exc, BindingError)

    def test_invalid_path_message(self) -> None:
        exc = InvalidPropertyPathError("adress.city", "'adress' is not a property of User")
        assert exc.property == "adress.city"
        assert "adress.city" in str(exc)

    def test_conversion_keeps_raw_value(self) -> None:
        exc = ConversionError("age", "abc", "Cannot convert")
        assert exc.user_value == "abc"

    def test_unresolved_names_type(self) -> None:
        exc = UnresolvedFormatterError(Decimal)
        assert exc.property_type is Decimal
        assert "Decimal" in str(exc)
