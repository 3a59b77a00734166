"""Formatter and AnnotationFormatterFactory contracts.

A Formatter converts between submitted text and one Python type.
An AnnotationFormatterFactory builds a Formatter from a *marker* attached
to a property, either inside ``Annotated[...]`` or through
:class:`~formbind.binding.binding.BindingConfiguration` metadata::

    price: Annotated[Decimal, CurrencyFormat(symbol="€")]

INVARIANT: ``parse`` signals bad input by raising, conventionally ValueError.
The binder turns any exception raised by ``parse`` into a ConversionError
result whose cause names the exception class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from formbind.domain.typeinfo import TypeDescriptor

T = TypeVar("T")
M = TypeVar("M")


class Formatter(ABC, Generic[T]):
    """Bidirectional text <-> value converter for one type."""

    @abstractmethod
    def parse(self, text: str) -> T:
        """Parse submitted *text* into a value."""
        ...

    @abstractmethod
    def format(self, value: T) -> str:
        """Render *value* back to text."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AnnotationFormatterFactory(ABC, Generic[M]):
    """Builds Formatters for properties carrying a marker of :attr:`marker_type`."""

    @property
    @abstractmethod
    def marker_type(self) -> type[M]:
        """Marker class this factory handles."""
        ...

    @abstractmethod
    def get_formatter(self, marker: M, descriptor: TypeDescriptor) -> Formatter[Any]:
        """Return a Formatter configured by *marker* for the described property."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.marker_type.__name__})"
