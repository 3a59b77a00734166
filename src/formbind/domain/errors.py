"""Binding error hierarchy.

Configuration-time errors (:class:`InvalidPropertyPathError`) are raised to
the caller. Bind-time errors are never raised out of ``Binder.bind``; the
binder converts them into failed :class:`~formbind.binding.results.BindingResult`
entries so one bad field never stops the others from binding.
"""

from __future__ import annotations

from typing import Any


class BindingError(Exception):
    """Base class for all formbind errors."""


class InvalidPropertyPathError(BindingError):
    """A property path is malformed or does not exist on the model."""

    def __init__(self, property: str, reason: str) -> None:
        self.property = property
        self.reason = reason
        super().__init__(f"Invalid property path '{property}': {reason}")


class UnboundPropertyError(BindingError):
    """No binding could be resolved for a submitted property."""

    def __init__(self, property: str) -> None:
        self.property = property
        super().__init__(f"No binding for property '{property}'")


class UnresolvedFormatterError(BindingError):
    """No formatter is registered for a property type or its markers."""

    def __init__(self, property_type: Any) -> None:
        self.property_type = property_type
        name = getattr(property_type, "__name__", repr(property_type))
        super().__init__(f"No formatter registered for type '{name}'")


class ConversionError(BindingError):
    """A submitted value could not be converted to the property type.

    The raw submitted value is kept verbatim in :attr:`user_value`.
    """

    def __init__(self, property: str, user_value: Any, message: str) -> None:
        self.property = property
        self.user_value = user_value
        super().__init__(message)


class PropertyAccessError(BindingError):
    """A converted value could not be written onto the model."""

    def __init__(self, property: str, message: str) -> None:
        self.property = property
        super().__init__(message)
