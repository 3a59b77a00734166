"""Formatting layer: Formatter contracts, built-ins, markers, and the registry."""

from formbind.formatting.annotations import (
    CurrencyFormat,
    DateFormat,
    NumberFormat,
    PercentFormat,
)
from formbind.formatting.base import AnnotationFormatterFactory, Formatter
from formbind.formatting.registry import FormatterRegistry

__all__ = [
    "AnnotationFormatterFactory",
    "CurrencyFormat",
    "DateFormat",
    "Formatter",
    "FormatterRegistry",
    "NumberFormat",
    "PercentFormat",
]
