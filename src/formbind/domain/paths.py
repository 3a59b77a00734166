"""Property paths and accessors.

Path syntax::

    name               attribute (or mapping key on dict models)
    address.city       nested attribute
    items[0]           list index
    items[0].sku       attribute of a list element
    attrs[color]       mapping key (quotes optional: attrs['color'])

A path is parsed once into :class:`PathSegment` values and then resolved
against a model into a :class:`PropertyAccessor`. Resolution checks every
segment against the model's runtime values and type hints, so a typo fails
at configuration time instead of at bind time.

INVARIANT: An accessor never re-parses its path. ``get``/``set`` walk the
pre-resolved segments only.
"""

from __future__ import annotations

import re
import types
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any, Union, get_args, get_origin

from formbind.domain.errors import InvalidPropertyPathError, PropertyAccessError
from formbind.domain.typeinfo import (
    TypeDescriptor,
    class_hints,
    describe,
    describe_value,
)

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_BRACKET = re.compile(r"\[\s*(?:'([^']*)'|\"([^\"]*)\"|([^\]]*?))\s*\]")


class SegmentKind(StrEnum):
    ATTRIBUTE = "attribute"
    INDEX = "index"
    KEY = "key"


@dataclass(frozen=True)
class PathSegment:
    kind: SegmentKind
    name: str

    @property
    def index(self) -> int:
        return int(self.name)


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Split *path* into segments.

    Bracket contents that are all digits become index segments, anything
    else becomes a key segment.

    Raises:
        InvalidPropertyPathError: On empty paths or malformed syntax.
    """
    if not path or not path.strip():
        raise InvalidPropertyPathError(path, "path is empty")

    segments: list[PathSegment] = []
    pos = 0
    expect_name = True
    while pos < len(path):
        if expect_name:
            match = _NAME.match(path, pos)
            if match is None:
                raise InvalidPropertyPathError(path, f"expected a name at offset {pos}")
            segments.append(PathSegment(SegmentKind.ATTRIBUTE, match.group(0)))
            pos = match.end()
            expect_name = False
            continue

        char = path[pos]
        if char == ".":
            pos += 1
            expect_name = True
            if pos == len(path):
                raise InvalidPropertyPathError(path, "path ends with '.'")
        elif char == "[":
            match = _BRACKET.match(path, pos)
            if match is None:
                raise InvalidPropertyPathError(path, f"unclosed '[' at offset {pos}")
            quoted = match.group(1) if match.group(1) is not None else match.group(2)
            raw = quoted if quoted is not None else match.group(3)
            if not raw:
                raise InvalidPropertyPathError(path, f"empty brackets at offset {pos}")
            if quoted is None and raw.isdigit():
                segments.append(PathSegment(SegmentKind.INDEX, raw))
            else:
                segments.append(PathSegment(SegmentKind.KEY, raw))
            pos = match.end()
        else:
            raise InvalidPropertyPathError(path, f"unexpected character {char!r} at offset {pos}")
    return tuple(segments)


def _element_hint(hint: Any, *, mapping: bool) -> Any:
    """Return the item hint of a container hint (``list[X]`` -> ``X``)."""
    args = [a for a in get_args(hint) if a is not Ellipsis]
    if not args:
        return Any
    return args[-1] if mapping else args[0]


def _unwrap(hint: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers, keeping generic arguments."""
    if get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    if get_origin(hint) in (Union, types.UnionType):
        members = [a for a in get_args(hint) if a is not type(None)]
        hint = _unwrap(members[0]) if members else Any
    return hint


@dataclass(frozen=True)
class _Step:
    """One resolved segment: how to reach the next object and what it is."""

    segment: PathSegment
    descriptor: TypeDescriptor


class PropertyAccessor:
    """Reads and writes one property path on a model.

    Built by :func:`resolve_accessor`. ``auto_grow`` controls whether
    missing intermediate objects are created on :meth:`set`.
    """

    def __init__(
        self,
        path: str,
        steps: tuple[_Step, ...],
        *,
        auto_grow: bool = True,
    ) -> None:
        self.path = path
        self._steps = steps
        self._auto_grow = auto_grow

    @property
    def descriptor(self) -> TypeDescriptor:
        """Type descriptor of the leaf property."""
        return self._steps[-1].descriptor

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return tuple(step.segment for step in self._steps)

    def get(self, model: Any) -> Any:
        """Return the current value at the path, or None if any link is missing."""
        current = model
        for step in self._steps:
            if current is None:
                return None
            current = _read(current, step.segment)
        return current

    def set(self, model: Any, value: Any) -> None:
        """Write *value* at the path.

        Raises:
            PropertyAccessError: When an intermediate object is missing and
                cannot be created, or the final write is rejected.
        """
        current = model
        for step in self._steps[:-1]:
            nxt = _read(current, step.segment)
            if nxt is None:
                nxt = self._grow(current, step)
            current = nxt
        try:
            _write(current, self._steps[-1].segment, value)
        except (AttributeError, TypeError, ValueError, LookupError) as exc:
            raise PropertyAccessError(
                self.path, f"Cannot write '{self.path}': {exc}"
            ) from exc

    def _grow(self, parent: Any, step: _Step) -> Any:
        if not self._auto_grow:
            raise PropertyAccessError(
                self.path, f"'{step.segment.name}' is None and auto-grow is disabled"
            )
        try:
            child = step.descriptor.build_default()
            _write(parent, step.segment, child)
        except (AttributeError, TypeError, ValueError, LookupError) as exc:
            raise PropertyAccessError(
                self.path, f"Cannot create '{step.segment.name}': {exc}"
            ) from exc
        return child

    def __repr__(self) -> str:
        return f"PropertyAccessor({self.path!r}, {self.descriptor.name})"


def _read(obj: Any, segment: PathSegment) -> Any:
    if segment.kind is SegmentKind.INDEX:
        if isinstance(obj, Mapping):
            return obj.get(segment.name, obj.get(segment.index))  # type: ignore[call-overload]
        try:
            return obj[segment.index]
        except IndexError:
            return None
    if segment.kind is SegmentKind.KEY or isinstance(obj, Mapping):
        return obj.get(segment.name) if isinstance(obj, Mapping) else None
    return getattr(obj, segment.name, None)


def _write(obj: Any, segment: PathSegment, value: Any) -> None:
    if segment.kind is SegmentKind.INDEX and isinstance(obj, MutableSequence):
        index = segment.index
        if index >= len(obj):
            obj.extend([None] * (index + 1 - len(obj)))
        obj[index] = value
    elif isinstance(obj, MutableMapping):
        obj[segment.name] = value
    elif segment.kind is SegmentKind.ATTRIBUTE:
        setattr(obj, segment.name, value)
    else:
        raise TypeError(f"{type(obj).__name__} does not support item assignment")


def resolve_accessor(model: Any, path: str, *, auto_grow: bool = True) -> PropertyAccessor:
    """Resolve *path* against *model* into a :class:`PropertyAccessor`.

    Each segment is checked against the object graph: attributes must be
    declared (type hint) or present on the current object; index segments
    need a sequence; key segments need a mapping. When a link is currently
    None, resolution continues through its declared type.

    Raises:
        InvalidPropertyPathError: If any segment does not exist.
    """
    segments = parse_path(path)
    steps: list[_Step] = []
    current: Any = model
    current_hint: Any = type(model)

    for segment in segments:
        hint, exists = _lookup(current, current_hint, segment)
        if not exists:
            owner = _owner_name(current, current_hint)
            raise InvalidPropertyPathError(
                path, f"'{segment.name}' is not a property of {owner}"
            )
        child = _read(current, segment) if current is not None else None
        if hint is None:
            descriptor = describe_value(child)
            hint = type(child) if child is not None else Any
        else:
            descriptor = describe(hint)
        steps.append(_Step(segment=segment, descriptor=descriptor))
        current = child
        current_hint = _unwrap(hint)

    return PropertyAccessor(path, tuple(steps), auto_grow=auto_grow)


def _owner_name(obj: Any, hint: Any) -> str:
    if obj is not None:
        return type(obj).__name__
    return getattr(hint, "__name__", repr(hint))


def _container_class(hint: Any) -> type:
    origin = get_origin(hint) or hint
    return origin if isinstance(origin, type) else object


def _lookup(obj: Any, hint: Any, segment: PathSegment) -> tuple[Any, bool]:
    """Return ``(child_hint, exists)`` for *segment* on *obj* / *hint*.

    ``child_hint`` is None when the property exists but is untyped.
    """
    container = _container_class(hint)
    is_mapping = isinstance(obj, Mapping) if obj is not None else issubclass(container, Mapping)

    if is_mapping:
        item = _element_hint(hint, mapping=True)
        return (None if item is Any else item), True

    if segment.kind is SegmentKind.INDEX:
        is_sequence = (
            isinstance(obj, Sequence) if obj is not None else issubclass(container, Sequence)
        )
        if not is_sequence or issubclass(container, str):
            return None, False
        item = _element_hint(hint, mapping=False)
        return (None if item is Any else item), True

    if segment.kind is SegmentKind.KEY or segment.name.startswith("_"):
        return None, False

    hints = class_hints(type(obj) if obj is not None else container)
    if segment.name in hints:
        return hints[segment.name], True
    if obj is not None and hasattr(obj, segment.name):
        return None, not callable(getattr(obj, segment.name))
    return None, False
