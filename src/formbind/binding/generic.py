"""GenericBinder: the default Binder implementation.

For each submitted value:

1. Resolve a Binding: explicit lookup when strict, lookup-or-synthesize
   when optimistic. Nothing resolvable -> ``UnboundPropertyError`` result.
2. Convert the raw value with the binding's formatter. Failure ->
   ``ConversionError`` result carrying the raw value.
3. Write the value onto the model. Rejected write -> ``PropertyAccessError``.

Every field is processed independently; one failure never stops the rest.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import structlog

from formbind.binding.base import Binder
from formbind.binding.binding import Binding, BindingConfiguration
from formbind.binding.results import BindingResult, BindingResultKind, BindingResults
from formbind.domain.errors import InvalidPropertyPathError, UnboundPropertyError
from formbind.domain.paths import resolve_accessor
from formbind.domain.values import UserValues
from formbind.formatting.registry import FormatterRegistry

if TYPE_CHECKING:
    from formbind.config.settings import BinderSettings
    from formbind.formatting.base import AnnotationFormatterFactory, Formatter

log = structlog.get_logger(__name__)


class GenericBinder(Binder):
    """Binds submitted values onto any object, dataclass, pydantic model, or dict.

    Args:
        model: The object to mutate. Not copied; the caller keeps ownership.
        registry: Formatter registry. Defaults to the built-in formatters.
            A registry may be shared between binders for reads.
        strict: Start in strict mode.
        auto_grow: Create missing intermediate objects on nested paths.
    """

    def __init__(
        self,
        model: Any,
        *,
        registry: FormatterRegistry | None = None,
        strict: bool = False,
        auto_grow: bool = True,
    ) -> None:
        if model is None:
            raise ValueError("model must not be None")
        self._model = model
        self._registry = registry if registry is not None else FormatterRegistry.with_defaults()
        self._strict = strict
        self._auto_grow = auto_grow
        self._bindings: dict[str, Binding] = {}

    @classmethod
    def from_settings(
        cls,
        model: Any,
        settings: BinderSettings,
        *,
        registry: FormatterRegistry | None = None,
    ) -> GenericBinder:
        """Build a binder honouring ``[binder]`` and ``[format]`` settings."""
        if registry is None:
            registry = FormatterRegistry.with_defaults(settings.format)
        return cls(model, registry=registry, **cls._settings_kwargs(settings))

    @classmethod
    def _settings_kwargs(cls, settings: BinderSettings) -> dict[str, Any]:
        return {"strict": settings.binder.strict, "auto_grow": settings.binder.auto_grow}

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def model(self) -> Any:
        return self._model

    @property
    def registry(self) -> FormatterRegistry:
        return self._registry

    @property
    def strict(self) -> bool:
        return self._strict

    def set_strict(self, strict: bool) -> None:
        self._strict = strict

    def configure_binding(self, configuration: BindingConfiguration) -> Binding:
        accessor = resolve_accessor(
            self._model, configuration.property, auto_grow=self._auto_grow
        )
        binding = Binding(
            configuration.property,
            accessor,
            self._model,
            self._registry,
            formatter=configuration.formatter,
            metadata=tuple(configuration.metadata),
        )
        if configuration.formatter is not None:
            log.debug(
                "binding.formatter_override",
                property=configuration.property,
                formatter=repr(configuration.formatter),
            )
        self._bindings[configuration.property] = binding
        return binding

    def register_formatter(self, property_type: type, formatter: Formatter[Any]) -> None:
        self._registry.register_formatter(property_type, formatter)

    def register_formatter_factory(self, factory: AnnotationFormatterFactory[Any]) -> None:
        self._registry.register_formatter_factory(factory)

    def get_binding(self, property: str) -> Binding | None:
        binding = self._bindings.get(property)
        if binding is not None or self._strict:
            return binding
        return self._create_implicit(property)

    def bindings(self) -> list[Binding]:
        """Bindings created so far, explicit and implicit."""
        return list(self._bindings.values())

    def _create_implicit(self, property: str) -> Binding | None:
        try:
            accessor = resolve_accessor(self._model, property, auto_grow=self._auto_grow)
        except InvalidPropertyPathError as exc:
            log.debug("binding.unresolvable", property=property, reason=exc.reason)
            return None
        binding = Binding(property, accessor, self._model, self._registry, implicit=True)
        self._bindings[property] = binding
        log.debug("binding.implicit", property=property, type=accessor.descriptor.name)
        return binding

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def create_user_values(self, user_map: Mapping[str, Any]) -> UserValues:
        """Wrap each submitted field as-is; list values become multi-valued."""
        return UserValues.from_mapping(user_map)

    def bind(self, values: UserValues) -> BindingResults:
        results: list[BindingResult] = []
        for user_value in values:
            binding = self.get_binding(user_value.property)
            if binding is None:
                error = UnboundPropertyError(user_value.property)
                results.append(
                    BindingResult.failure(
                        user_value.property,
                        BindingResultKind.UNBOUND,
                        user_value.value,
                        str(error),
                        cause=type(error).__name__,
                    )
                )
                continue
            results.append(binding.apply(user_value))

        bound = sum(1 for r in results if r.ok)
        log.debug(
            "bind.complete",
            model=type(self._model).__name__,
            strict=self._strict,
            bound=bound,
            failed=len(results) - bound,
        )
        return BindingResults(
            results=tuple(results),
            meta={
                "binder": type(self).__name__,
                "model": type(self._model).__name__,
                "strict": self._strict,
            },
        )

    def bind_mapping(self, user_map: Mapping[str, Any]) -> BindingResults:
        """Shortcut for ``bind(create_user_values(user_map))``."""
        return self.bind(self.create_user_values(user_map))
