"""UserValue and UserValues: raw submitted fields before coercion.

A UserValue is one submitted field: a property path plus either a single
value or a tuple of values (multi-select inputs, repeated query keys).
UserValues keeps submission order, which is also the order of the
resulting :class:`~formbind.binding.results.BindingResults`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel, field_validator


class UserValue(BaseModel):
    """One raw submitted field.

    Attributes:
        property: Property path the value targets (e.g. ``"address.city"``).
        value: A single value, or a tuple for multi-valued fields.
    """

    model_config = {"frozen": True}

    property: str
    value: Any = None

    @field_validator("value", mode="before")
    @classmethod
    def _freeze_sequences(cls, value: Any) -> Any:
        if isinstance(value, (list, set, frozenset)):
            return tuple(value)
        return value

    @property
    def is_multi(self) -> bool:
        """Whether the field carries more than one submitted value."""
        return isinstance(self.value, tuple)

    @property
    def values(self) -> tuple[Any, ...]:
        """The submitted values as a tuple (single values become a 1-tuple)."""
        if isinstance(self.value, tuple):
            return self.value
        return (self.value,)


class UserValues:
    """Ordered, immutable container of :class:`UserValue` entries.

    Duplicate properties are allowed; lookups return the first entry.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[UserValue] = ()) -> None:
        self._items: tuple[UserValue, ...] = tuple(items)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> UserValues:
        """Wrap each ``(field, value)`` pair as-is, in mapping order."""
        return cls(UserValue(property=name, value=value) for name, value in raw.items())

    def __iter__(self) -> Iterator[UserValue]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> UserValue:
        return self._items[index]

    def __contains__(self, property: object) -> bool:
        return any(item.property == property for item in self._items)

    def __repr__(self) -> str:
        return f"UserValues({list(self._items)!r})"

    def get(self, property: str) -> UserValue | None:
        """Return the first entry for *property*, or None."""
        for item in self._items:
            if item.property == property:
                return item
        return None

    def properties(self) -> list[str]:
        """Property paths in submission order."""
        return [item.property for item in self._items]
