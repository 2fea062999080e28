"""Outcome values returned by state-changing operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureReason(str, Enum):
    """Why an operation did not change anything."""

    NOT_FOUND = "not_found"  # Referenced id is unknown
    INVALID = "invalid"  # Input rejected before mutation
    REFUSED = "refused"  # Valid input, but not allowed in the current state


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success with a value, or failure with a reason.

    Failed results never carry a value and always mean that no state was
    mutated or persisted.
    """

    value: T | None = None
    reason: FailureReason | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, raising ValueError on a failed result."""
        if not self.ok:
            raise ValueError(f"{self.reason.value}: {self.detail}")
        return self.value

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, detail: str) -> "Result[T]":
        return cls(reason=FailureReason.NOT_FOUND, detail=detail)

    @classmethod
    def invalid(cls, detail: str) -> "Result[T]":
        return cls(reason=FailureReason.INVALID, detail=detail)

    @classmethod
    def refused(cls, detail: str) -> "Result[T]":
        return cls(reason=FailureReason.REFUSED, detail=detail)
