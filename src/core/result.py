"""Result types for railway-oriented programming.

Authorization checks that should not raise (``check_*`` methods, identifier
extraction, audit sinks) return a Result instead. The raising ``require_*``
variants unwrap the Failure and raise the carried error.

Usage:
    result = policy.check_permission(identity, Permission.MANAGE_USERS)
    match result:
        case Success():
            ...
        case Failure(error=error):
            print(error.code)
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
