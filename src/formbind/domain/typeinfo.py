"""Type descriptors: what a property hint means for binding.

A :class:`TypeDescriptor` flattens a type hint into the three facts the
binder needs: the concrete target class, whether ``None`` is allowed, and
whether the property is a collection (with its element descriptor).
``Annotated`` metadata is collected as *markers* so formatter factories can
pick them up later.

Examples::

    describe(int)                                   # int, required
    describe(int | None)                            # int, optional
    describe(Annotated[date, DateFormat("%d/%m")])  # date, one marker
    describe(list[int])                             # list of int
"""

from __future__ import annotations

import inspect
import sys
import types
import typing
from dataclasses import dataclass, field
from typing import Annotated, Any, Union, get_args, get_origin

COLLECTION_TYPES: tuple[type, ...] = (list, set, frozenset, tuple)


@dataclass(frozen=True)
class TypeDescriptor:
    """Flattened view of a property type hint."""

    type: type
    optional: bool = False
    markers: tuple[Any, ...] = ()
    element: TypeDescriptor | None = None
    hint: Any = field(default=None, compare=False)

    @property
    def is_collection(self) -> bool:
        return self.element is not None

    @property
    def name(self) -> str:
        if self.element is not None:
            return f"{self.type.__name__}[{self.element.name}]"
        return self.type.__name__

    def with_markers(self, markers: tuple[Any, ...]) -> TypeDescriptor:
        """Return a copy carrying *markers* in addition to the existing ones."""
        if not markers:
            return self
        return TypeDescriptor(
            type=self.type,
            optional=self.optional,
            markers=(*self.markers, *markers),
            element=self.element,
            hint=self.hint,
        )

    def build_default(self) -> Any:
        """Instantiate the target class with no arguments.

        Used to auto-grow missing intermediate objects on nested paths.
        Raises TypeError when the class needs constructor arguments.
        """
        return self.type()


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def describe(hint: Any) -> TypeDescriptor:
    """Build a :class:`TypeDescriptor` from a type hint.

    Unknown or untyped hints (``Any``, missing annotations) describe ``str``.
    """
    markers: tuple[Any, ...] = ()
    optional = False
    original = hint

    if get_origin(hint) is Annotated:
        base, *extra = get_args(hint)
        markers = tuple(extra)
        hint = base

    if _is_union(get_origin(hint)):
        members = [a for a in get_args(hint) if a is not type(None)]
        optional = len(members) != len(get_args(hint))
        # Only Optional[X] is bindable; wider unions bind as their first member.
        hint = members[0] if members else str
        if get_origin(hint) is Annotated:
            base, *extra = get_args(hint)
            markers = (*markers, *extra)
            hint = base

    origin = get_origin(hint)
    if origin in COLLECTION_TYPES:
        args = [a for a in get_args(hint) if a is not Ellipsis]
        element = describe(args[0]) if args else describe(str)
        return TypeDescriptor(
            type=origin, optional=optional, markers=markers, element=element, hint=original
        )
    if hint in COLLECTION_TYPES:
        return TypeDescriptor(
            type=hint, optional=optional, markers=markers, element=describe(str), hint=original
        )

    if hint is Any or hint is None or not isinstance(hint, type):
        if origin is not None and isinstance(origin, type):
            hint = origin
        else:
            hint = str
    return TypeDescriptor(type=hint, optional=optional, markers=markers, hint=original)


def describe_value(value: Any) -> TypeDescriptor:
    """Describe an untyped property from its current runtime value."""
    if value is None:
        return TypeDescriptor(type=str, optional=True)
    if isinstance(value, COLLECTION_TYPES):
        sample = next(iter(value), None)
        element = describe_value(sample) if sample is not None else describe(str)
        return TypeDescriptor(type=type(value), element=element)
    return TypeDescriptor(type=type(value))


def class_hints(cls: type) -> dict[str, Any]:
    """Resolve annotations for *cls*, keeping ``Annotated`` metadata.

    When the class as a whole cannot be resolved (a ``TYPE_CHECKING``-only
    import under postponed annotations, a locally defined class), each
    annotation is resolved on its own. Annotations that still cannot be
    resolved map to None and are treated as untyped.
    """
    try:
        hints: dict[str, Any] = typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError, SyntaxError):
        hints = {}
        for klass in reversed(getattr(cls, "__mro__", (cls,))):
            if klass is object:
                continue
            hints.update(_resolve_each(klass))
    return {
        name: hint
        for name, hint in hints.items()
        if not _is_class_var(hint)
    }


def _resolve_each(klass: type) -> dict[str, Any]:
    try:
        annotations = inspect.get_annotations(klass)
    except NameError:
        return {}
    module = sys.modules.get(klass.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {**vars(klass), klass.__name__: klass}
    return {
        name: _resolve_one(hint, globalns, localns) for name, hint in annotations.items()
    }


def _resolve_one(hint: Any, globalns: dict[str, Any], localns: dict[str, Any]) -> Any:
    if isinstance(hint, str) and hint.split("[", 1)[0].strip() in ("ClassVar", "typing.ClassVar"):
        return typing.ClassVar
    holder = types.SimpleNamespace(__annotations__={"hint": hint})
    try:
        return typing.get_type_hints(holder, globalns, localns, include_extras=True)["hint"]
    except (NameError, TypeError, AttributeError, SyntaxError):
        return None


def _is_class_var(hint: Any) -> bool:
    return hint is typing.ClassVar or get_origin(hint) is typing.ClassVar
