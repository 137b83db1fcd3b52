"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. Expected outcomes of a flow (unknown account,
wrong code, expired token) travel as data; only infrastructure faults raise.

Usage:
    def check_code(stored: str, supplied: str) -> Result[None, str]:
        if stored != supplied:
            return Failure(error="invalid_code")
        return Success(value=None)

    match check_code("123456", "654321"):
        case Success(value=_):
            ...
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
