"""Binding models whose annotations cannot all be resolved at runtime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from formbind.binding.generic import GenericBinder
from formbind.binding.results import BindingResultKind
from formbind.domain.typeinfo import class_hints

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class Invoice:
    quantity: int = 0
    total: Decimal | None = None
    paid: bool = False


class TestClassHints:
    def test_resolvable_hints_survive_unresolvable_sibling(self) -> None:
        hints = class_hints(Invoice)
        assert hints["quantity"] is int
        assert hints["paid"] is bool
        assert hints["total"] is None


class TestBinding:
    def test_bad_int_is_a_conversion_error(self) -> None:
        invoice = Invoice()
        results = GenericBinder(invoice).bind_mapping({"quantity": "abc"})
        assert results[0].kind is BindingResultKind.CONVERSION
        assert results[0].user_value == "abc"
        assert invoice.quantity == 0

    def test_int_is_coerced(self) -> None:
        invoice = Invoice()
        assert GenericBinder(invoice).bind_mapping({"quantity": "3"})[0].ok
        assert invoice.quantity == 3

    def test_bool_is_coerced(self) -> None:
        invoice = Invoice()
        assert GenericBinder(invoice).bind_mapping({"paid": "true"})[0].ok
        assert invoice.paid is True

    def test_unresolved_hint_binds_as_untyped(self) -> None:
        invoice = Invoice()
        assert GenericBinder(invoice).bind_mapping({"total": "9.5"})[0].ok
        assert invoice.total == "9.5"

    def test_locally_defined_model(self) -> None:
        @dataclass
        class Address:
            city: str = ""

        @dataclass
        class Person:
            age: int = 0
            address: Address | None = None

        person = Person()
        results = GenericBinder(person).bind_mapping({"age": "42"})
        assert results[0].ok
        assert person.age == 42
