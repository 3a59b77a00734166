"""Binding and BindingConfiguration.

A Binding ties one property path of one model to its formatting rules.
It is immutable: reconfiguring a path creates a new Binding.

The formatter is resolved from the registry every time a value is applied
(unless the configuration pinned one), so a formatter registered after the
binding was created still takes effect on the next bind.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from formbind.binding.results import BindingResult, BindingResultKind
from formbind.domain.errors import (
    ConversionError,
    PropertyAccessError,
    UnresolvedFormatterError,
)
from formbind.formatting.base import Formatter

if TYPE_CHECKING:
    from formbind.domain.paths import PropertyAccessor
    from formbind.domain.typeinfo import TypeDescriptor
    from formbind.domain.values import UserValue
    from formbind.formatting.registry import FormatterRegistry


@dataclass(frozen=True)
class BindingConfiguration:
    """Request to create a Binding.

    Attributes:
        property: Property path on the model.
        formatter: Formatter to use instead of registry resolution.
        metadata: Formatting markers for the property, treated exactly like
            ``Annotated`` metadata on its type hint.
    """

    property: str
    formatter: Formatter[Any] | None = None
    metadata: tuple[Any, ...] = ()


class Binding:
    """One model property and how submitted text is converted for it."""

    def __init__(
        self,
        property: str,
        accessor: PropertyAccessor,
        model: Any,
        registry: FormatterRegistry,
        *,
        formatter: Formatter[Any] | None = None,
        metadata: tuple[Any, ...] = (),
        implicit: bool = False,
    ) -> None:
        self._property = property
        self._accessor = accessor
        self._model = model
        self._registry = registry
        self._formatter = formatter
        self._metadata = metadata
        self._implicit = implicit

    @property
    def descriptor(self) -> TypeDescriptor:
        """Leaf type descriptor including configured metadata markers."""
        return self._accessor.descriptor.with_markers(self._metadata)

    @property
    def implicit(self) -> bool:
        """True when the binder synthesized this binding on demand."""
        return self._implicit

    @property
    def is_collection(self) -> bool:
        return self.descriptor.is_collection

    def __repr__(self) -> str:
        kind = "implicit" if self._implicit else "explicit"
        return f"Binding({self._property!r}, {self.descriptor.name}, {kind})"

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def resolve_formatter(self) -> Formatter[Any]:
        """Formatter for the property (element formatter for collections).

        Raises:
            UnresolvedFormatterError: If the registry has no match.
        """
        if self._formatter is not None:
            return self._formatter
        descriptor = self.descriptor
        if descriptor.element is not None:
            return self._registry.resolve_formatter(
                descriptor.element.with_markers(descriptor.markers)
            )
        return self._registry.resolve_formatter(descriptor)

    def get_value(self) -> Any:
        """Current model value at the property path."""
        return self._accessor.get(self._model)

    def get_formatted_value(self) -> str | tuple[str, ...]:
        """Current model value rendered as text.

        Collections render as a tuple of element strings; None renders as "".
        """
        value = self.get_value()
        if value is None:
            return () if self.is_collection else ""
        formatter = self.resolve_formatter()
        if self.is_collection:
            return tuple(formatter.format(item) for item in value)
        return formatter.format(value)

    # ------------------------------------------------------------------
    # Coercion and application
    # ------------------------------------------------------------------

    def coerce(self, raw: Any) -> Any:
        """Convert a raw submitted value to the property type.

        Raises:
            ConversionError: If the value cannot be converted.
            UnresolvedFormatterError: If a formatter is needed but none resolves.
        """
        descriptor = self.descriptor
        cached: list[Formatter[Any]] = []

        def formatter() -> Formatter[Any]:
            if not cached:
                cached.append(self.resolve_formatter())
            return cached[0]

        if descriptor.element is not None:
            if isinstance(raw, tuple):
                items = raw
            elif raw is None or (isinstance(raw, str) and not raw.strip()):
                items = ()
            else:
                items = (raw,)
            element = descriptor.element
            converted = [self._coerce_scalar(item, element, formatter) for item in items]
            return descriptor.type(converted)

        if isinstance(raw, tuple):
            if len(raw) != 1:
                raise ConversionError(
                    self._property,
                    raw,
                    f"'{self._property}' accepts a single value, got {len(raw)}",
                )
            raw = raw[0]
        return self._coerce_scalar(raw, descriptor, formatter)

    def _coerce_scalar(
        self,
        raw: Any,
        descriptor: TypeDescriptor,
        formatter: Callable[[], Formatter[Any]],
    ) -> Any:
        target = descriptor.type
        if raw is not None and not isinstance(raw, str) and isinstance(raw, target):
            if not isinstance(raw, bool) or target is bool:
                return raw

        text = "" if raw is None else (raw if isinstance(raw, str) else str(raw))
        if not text.strip() and target is not str:
            if descriptor.optional:
                return None
            if target is bool:
                return False
            raise ConversionError(
                self._property, raw, f"'{self._property}' requires a {descriptor.name} value"
            )

        resolved = formatter()
        try:
            return resolved.parse(text)
        except Exception as exc:
            raise ConversionError(
                self._property,
                raw,
                f"Cannot convert {text!r} to {descriptor.name}: {exc}",
            ) from exc

    def apply(self, user_value: UserValue) -> BindingResult:
        """Coerce *user_value* and write it onto the model.

        Never raises for bad input; the outcome is returned as a BindingResult.
        """
        raw = user_value.value
        try:
            value = self.coerce(raw)
        except UnresolvedFormatterError as exc:
            return BindingResult.failure(
                self._property,
                BindingResultKind.CONVERSION,
                raw,
                str(exc),
                cause=type(exc).__name__,
            )
        except ConversionError as exc:
            underlying = exc.__cause__
            return BindingResult.failure(
                self._property,
                BindingResultKind.CONVERSION,
                raw,
                str(exc),
                cause=type(underlying).__name__ if underlying is not None else None,
            )

        try:
            self._accessor.set(self._model, value)
        except PropertyAccessError as exc:
            return BindingResult.failure(
                self._property,
                BindingResultKind.ACCESS,
                raw,
                str(exc),
                cause=type(exc.__cause__).__name__ if exc.__cause__ is not None else None,
            )
        return BindingResult.success(self._property, raw, value)

    # Defined last: the name shadows the builtin for the rest of the class body.
    @property
    def property(self) -> str:
        """Property path this binding targets."""
        return self._property
