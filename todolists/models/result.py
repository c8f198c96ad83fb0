"""Value-or-error results returned by list and todo operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic
from typing import Optional
from typing import TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Kinds of recoverable failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass
class Result(Generic[T]):
    """Outcome of an operation.

    Either ``value`` is set and ``error`` is None, or ``error`` names what went
    wrong and ``message`` holds the text to show the user.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, message: str) -> "Result[T]":
        return cls(error=ErrorKind.VALIDATION, message=message)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls(error=ErrorKind.NOT_FOUND, message=message)
