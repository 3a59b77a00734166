"""FormatterRegistry: type and marker -> Formatter lookup.

Resolution order for a property:

1. The first marker whose class (or a base class) has a registered
   :class:`AnnotationFormatterFactory`.
2. The formatter registered for the exact property type.
3. For Enum subclasses: a formatter registered for an Enum base, else an
   :class:`EnumFormatter` built for the type.
4. The formatter registered for the nearest base class in the MRO.

Registrations are last-write-wins and never removed. Reads are plain dict
lookups and safe to share; registration is not locked, so owners that
share a registry across threads must serialize their own writes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from formbind.domain.errors import UnresolvedFormatterError
from formbind.domain.typeinfo import TypeDescriptor, describe
from formbind.formatting.annotations import (
    CurrencyFormatFactory,
    DateFormatFactory,
    NumberFormatFactory,
    PercentFormatFactory,
)
from formbind.formatting.base import AnnotationFormatterFactory, Formatter
from formbind.formatting.builtins import EnumFormatter, default_formatters

if TYPE_CHECKING:
    from formbind.config.models import FormatConfig

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Holds formatter registrations for one binder (or a group of binders)."""

    def __init__(self) -> None:
        self._formatters: dict[type, Formatter[Any]] = {}
        self._factories: dict[type, AnnotationFormatterFactory[Any]] = {}

    @classmethod
    def with_defaults(cls, config: FormatConfig | None = None) -> FormatterRegistry:
        """Registry preloaded with the built-in formatters and marker factories."""
        from formbind.config.models import FormatConfig

        cfg = config or FormatConfig()
        registry = cls()
        for type_, formatter in default_formatters(
            date_pattern=cfg.date_pattern,
            datetime_pattern=cfg.datetime_pattern,
            time_pattern=cfg.time_pattern,
            true_values=cfg.true_values,
            false_values=cfg.false_values,
            grouping_separator=cfg.grouping_separator,
        ).items():
            registry.register_formatter(type_, formatter)
        registry.register_formatter_factory(DateFormatFactory())
        registry.register_formatter_factory(
            NumberFormatFactory(grouping_separator=cfg.grouping_separator)
        )
        registry.register_formatter_factory(
            CurrencyFormatFactory(
                symbol=cfg.currency_symbol,
                places=cfg.currency_places,
                grouping_separator=cfg.grouping_separator or ",",
            )
        )
        registry.register_formatter_factory(PercentFormatFactory())
        return registry

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_formatter(self, property_type: type, formatter: Formatter[Any]) -> None:
        """Associate *formatter* with *property_type*, replacing any earlier one."""
        previous = self._formatters.get(property_type)
        self._formatters[property_type] = formatter
        if previous is not None and previous is not formatter:
            logger.debug(
                "Replaced formatter for %s: %r -> %r",
                property_type.__name__,
                previous,
                formatter,
            )

    def register_formatter_factory(self, factory: AnnotationFormatterFactory[Any]) -> None:
        """Associate *factory* with its marker type, replacing any earlier one."""
        self._factories[factory.marker_type] = factory
        logger.debug("Registered formatter factory for %s", factory.marker_type.__name__)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_formatter(
        self,
        property_type: type | TypeDescriptor,
        annotations: Iterable[Any] = (),
    ) -> Formatter[Any]:
        """Return the most specific formatter for a property.

        Args:
            property_type: The property class, or a descriptor of it.
            annotations: Markers attached to the property. Markers carried
                by a descriptor are considered as well.

        Raises:
            UnresolvedFormatterError: If nothing matches.
        """
        descriptor = (
            property_type if isinstance(property_type, TypeDescriptor) else describe(property_type)
        )
        markers = (*annotations, *descriptor.markers)

        for marker in markers:
            factory = self._factory_for(type(marker))
            if factory is None:
                continue
            try:
                return factory.get_formatter(marker, descriptor)
            except TypeError as exc:
                raise UnresolvedFormatterError(descriptor.type) from exc

        target = descriptor.type
        exact = self._formatters.get(target)
        if exact is not None:
            return exact

        if issubclass(target, Enum):
            for base in target.__mro__[1:]:
                if issubclass(base, Enum) and base in self._formatters:
                    return self._formatters[base]
            return EnumFormatter(target)

        for base in target.__mro__[1:]:
            if base is object:
                break
            formatter = self._formatters.get(base)
            if formatter is not None:
                return formatter
        raise UnresolvedFormatterError(target)

    def _factory_for(self, marker_type: type) -> AnnotationFormatterFactory[Any] | None:
        for base in marker_type.__mro__:
            factory = self._factories.get(base)
            if factory is not None:
                return factory
        return None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def formatters(self) -> dict[type, Formatter[Any]]:
        """Snapshot of type registrations."""
        return dict(self._formatters)

    def factories(self) -> dict[type, AnnotationFormatterFactory[Any]]:
        """Snapshot of marker factory registrations."""
        return dict(self._factories)

    def __contains__(self, property_type: object) -> bool:
        return property_type in self._formatters
