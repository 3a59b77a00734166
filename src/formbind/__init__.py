"""formbind: bind user-submitted values onto model objects.

Public entry points::

    from formbind import GenericBinder

    binder = GenericBinder(order)
    results = binder.bind(binder.create_user_values({"quantity": "3"}))
    if results.has_failures:
        ...
"""

from __future__ import annotations

__version__ = "0.3.0"

from formbind.binding import (
    Binder,
    Binding,
    BindingConfiguration,
    BindingResult,
    BindingResultKind,
    BindingResults,
    GenericBinder,
    WebBinder,
)
from formbind.domain.errors import (
    BindingError,
    ConversionError,
    InvalidPropertyPathError,
    PropertyAccessError,
    UnboundPropertyError,
    UnresolvedFormatterError,
)
from formbind.domain.values import UserValue, UserValues
from formbind.formatting import AnnotationFormatterFactory, Formatter, FormatterRegistry

__all__ = [
    "AnnotationFormatterFactory",
    "Binder",
    "Binding",
    "BindingConfiguration",
    "BindingError",
    "BindingResult",
    "BindingResultKind",
    "BindingResults",
    "ConversionError",
    "Formatter",
    "FormatterRegistry",
    "GenericBinder",
    "InvalidPropertyPathError",
    "PropertyAccessError",
    "UnboundPropertyError",
    "UnresolvedFormatterError",
    "UserValue",
    "UserValues",
    "WebBinder",
    "__version__",
]
