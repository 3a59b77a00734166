"""WebBinder: GenericBinder with HTML form conventions.

Browsers omit unchecked checkboxes and empty multi-selects from a form
submission, so "not sent" and "cleared" look the same. Two naming
conventions fix that:

``_name`` (field marker)
    Sent alongside the real field, typically as a hidden input. When
    ``name`` is absent, it is bound with an empty value: ``False`` for
    booleans, an empty collection for collections, ``""`` for text and
    ``None`` for other optional properties.

``!name`` (field default)
    Carries the value to use when ``name`` is absent. Takes precedence
    over a field marker.

Marker and default entries are consumed here and never bound themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from formbind.binding.generic import GenericBinder
from formbind.domain.values import UserValue, UserValues

if TYPE_CHECKING:
    from formbind.config.settings import BinderSettings


class WebBinder(GenericBinder):
    """Binder for HTML form submissions."""

    def __init__(
        self,
        model: Any,
        *,
        field_marker_prefix: str = "_",
        field_default_prefix: str = "!",
        **kwargs: Any,
    ) -> None:
        super().__init__(model, **kwargs)
        self.field_marker_prefix = field_marker_prefix
        self.field_default_prefix = field_default_prefix

    @classmethod
    def _settings_kwargs(cls, settings: BinderSettings) -> dict[str, Any]:
        return {
            **super()._settings_kwargs(settings),
            "field_marker_prefix": settings.binder.field_marker_prefix,
            "field_default_prefix": settings.binder.field_default_prefix,
        }

    def create_user_values(self, user_map: Mapping[str, Any]) -> UserValues:
        values: dict[str, Any] = {}
        defaults: dict[str, Any] = {}
        markers: list[str] = []

        for name, value in user_map.items():
            if self.field_default_prefix and name.startswith(self.field_default_prefix):
                defaults[name[len(self.field_default_prefix) :]] = value
            elif self.field_marker_prefix and name.startswith(self.field_marker_prefix):
                markers.append(name[len(self.field_marker_prefix) :])
            else:
                values[name] = value

        for field, value in defaults.items():
            values.setdefault(field, value)
        for field in markers:
            values.setdefault(field, "")

        return UserValues(UserValue(property=name, value=value) for name, value in values.items())
