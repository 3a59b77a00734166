"""BindingResult and BindingResults: the outcome of one bind cycle.

INVARIANT: ``Binder.bind`` returns exactly one BindingResult per submitted
UserValue, in submission order. Failures are data, never exceptions.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class BindingResultKind(StrEnum):
    """Outcome category of a single field."""

    SUCCESS = "success"
    UNBOUND = "UnboundPropertyError"
    CONVERSION = "ConversionError"
    ACCESS = "PropertyAccessError"


class BindingResult(BaseModel):
    """Per-property outcome.

    Attributes:
        property: The submitted property path.
        kind: Success or the failure category.
        user_value: The raw submitted value, kept verbatim.
        value: The coerced value written to the model (success only).
        message: Human-readable description of the outcome.
        cause: Name of the underlying error, e.g. ``"UnresolvedFormatterError"``.
    """

    model_config = {"frozen": True}

    property: str
    kind: BindingResultKind
    user_value: Any = None
    value: Any = None
    message: str = ""
    cause: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is BindingResultKind.SUCCESS

    @property
    def is_failure(self) -> bool:
        return not self.ok

    @classmethod
    def success(cls, property: str, user_value: Any, value: Any) -> BindingResult:
        return cls(
            property=property,
            kind=BindingResultKind.SUCCESS,
            user_value=user_value,
            value=value,
            message="Bound successfully",
        )

    @classmethod
    def failure(
        cls,
        property: str,
        kind: BindingResultKind,
        user_value: Any,
        message: str,
        *,
        cause: str | None = None,
    ) -> BindingResult:
        return cls(
            property=property,
            kind=kind,
            user_value=user_value,
            message=message,
            cause=cause,
        )


class BindingResults(BaseModel):
    """Ordered, immutable collection of BindingResult entries.

    Attributes:
        results: One entry per submitted value, in submission order.
        meta: Optional metadata (binder kind, strict flag, counts).
    """

    model_config = {"frozen": True}

    results: tuple[BindingResult, ...] = ()
    meta: dict[str, Any] = Field(default_factory=dict)

    def __iter__(self) -> Iterator[BindingResult]:  # type: ignore[override]
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> BindingResult:
        return self.results[index]

    def get(self, property: str) -> BindingResult | None:
        """Return the first result for *property*, or None."""
        for result in self.results:
            if result.property == property:
                return result
        return None

    def properties(self) -> list[str]:
        return [result.property for result in self.results]

    def successes(self) -> list[BindingResult]:
        return [result for result in self.results if result.ok]

    def failures(self) -> list[BindingResult]:
        return [result for result in self.results if result.is_failure]

    @property
    def has_failures(self) -> bool:
        return any(result.is_failure for result in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Summary keyed by property, suitable for JSON error payloads."""
        return {
            "ok": not self.has_failures,
            "bound": len(self.successes()),
            "failed": len(self.failures()),
            "fields": {
                result.property: {
                    "kind": str(result.kind),
                    "message": result.message,
                    "user_value": result.user_value,
                    **({"cause": result.cause} if result.cause else {}),
                }
                for result in self.results
            },
        }
