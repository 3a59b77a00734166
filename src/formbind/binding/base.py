"""Binder: binds user-entered values to properties of a model object.

Typical use::

    binder = GenericBinder(account)
    binder.configure_binding(BindingConfiguration("balance", metadata=(CurrencyFormat(),)))
    results = binder.bind(binder.create_user_values(form))

A binder is *optimistic* by default: bindings are created on demand for any
property path that exists on the model. A *strict* binder only binds
properties configured through :meth:`Binder.configure_binding`.

INVARIANT: ``bind`` never rolls back. If a later field fails, values written
by earlier successful fields stay on the model. Callers that need
all-or-nothing semantics bind onto a copy and swap it in on success.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formbind.binding.binding import Binding, BindingConfiguration
    from formbind.binding.results import BindingResults
    from formbind.domain.values import UserValues
    from formbind.formatting.base import AnnotationFormatterFactory, Formatter


class Binder(ABC):
    """Abstract binder contract."""

    @property
    @abstractmethod
    def model(self) -> Any:
        """The model object this binder binds to."""
        ...

    def get_model(self) -> Any:
        """The model object this binder binds to."""
        return self.model

    @abstractmethod
    def set_strict(self, strict: bool) -> None:
        """Toggle strict mode for subsequent :meth:`bind` calls."""
        ...

    @abstractmethod
    def configure_binding(self, configuration: BindingConfiguration) -> Binding:
        """Add a binding and return it.

        Raises:
            InvalidPropertyPathError: If the path does not exist on the model.
        """
        ...

    @abstractmethod
    def register_formatter(self, property_type: type, formatter: Formatter[Any]) -> None:
        """Format values of *property_type* with *formatter* (last write wins)."""
        ...

    @abstractmethod
    def register_formatter_factory(self, factory: AnnotationFormatterFactory[Any]) -> None:
        """Format properties carrying the factory's marker."""
        ...

    @abstractmethod
    def get_binding(self, property: str) -> Binding | None:
        """Return the binding for *property*, or None if there is none."""
        ...

    @abstractmethod
    def bind(self, values: UserValues) -> BindingResults:
        """Bind *values* to the model; one result per value, in order."""
        ...

    @abstractmethod
    def create_user_values(self, user_map: Mapping[str, Any]) -> UserValues:
        """Build UserValues from submitted fields, applying binder-specific defaults."""
        ...
