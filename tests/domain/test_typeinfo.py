"""Tests for type hint descriptors."""

from dataclasses import dataclass
from datetime import date
from typing import Annotated, Any, ClassVar, Optional

from formbind.domain.typeinfo import class_hints, describe, describe_value
from formbind.formatting.annotations import DateFormat


class TestDescribe:
    def test_plain_type(self) -> None:
        d = describe(int)
        assert d.type is int
        assert d.optional is False
        assert d.is_collection is False

    def test_optional_pipe(self) -> None:
        d = describe(int | None)
        assert d.type is int
        assert d.optional is True

    def test_optional_typing(self) -> None:
        assert describe(Optional[str]).optional is True  # noqa: UP045

    def test_annotated_markers(self) -> None:
        marker = DateFormat("%d/%m/%Y")
        d = describe(Annotated[date, marker])
        assert d.type is date
        assert d.markers == (marker,)

    def test_optional_annotated(self) -> None:
        marker = DateFormat("%d/%m/%Y")
        d = describe(Annotated[date, marker] | None)
        assert d.type is date
        assert d.optional is True
        assert d.markers == (marker,)

    def test_list_element(self) -> None:
        d = describe(list[int])
        assert d.type is list
        assert d.element is not None
        assert d.element.type is int
        assert d.name == "list[int]"

    def test_variadic_tuple(self) -> None:
        d = describe(tuple[str, ...])
        assert d.type is tuple
        assert d.element is not None and d.element.type is str

    def test_bare_collection_defaults_to_str(self) -> None:
        d = describe(set)
        assert d.element is not None and d.element.type is str

    def test_any_is_str(self) -> None:
        assert describe(Any).type is str

    def test_with_markers_appends(self) -> None:
        first, second = DateFormat("%Y"), DateFormat("%m")
        d = describe(Annotated[date, first]).with_markers((second,))
        assert d.markers == (first, second)


class TestDescribeValue:
    def test_none_is_optional_str(self) -> None:
        d = describe_value(None)
        assert d.type is str
        assert d.optional is True

    def test_runtime_type(self) -> None:
        assert describe_value(3.5).type is float

    def test_list_sample(self) -> None:
        d = describe_value([1, 2])
        assert d.element is not None and d.element.type is int


@dataclass
class _WithClassVar:
    registry: ClassVar[dict[str, int]] = {}
    count: int = 0


class TestClassHints:
    def test_classvars_are_excluded(self) -> None:
        assert set(class_hints(_WithClassVar)) == {"count"}
