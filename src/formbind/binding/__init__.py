"""Binding layer: Binder contract, bindings, results, and binder implementations.

INVARIANT: Bind-time failures are returned as BindingResult entries,
never raised.
"""

from formbind.binding.base import Binder
from formbind.binding.binding import Binding, BindingConfiguration
from formbind.binding.generic import GenericBinder
from formbind.binding.results import BindingResult, BindingResultKind, BindingResults
from formbind.binding.web import WebBinder

__all__ = [
    "Binder",
    "Binding",
    "BindingConfiguration",
    "BindingResult",
    "BindingResultKind",
    "BindingResults",
    "GenericBinder",
    "WebBinder",
]
