"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error codes and their status classes
- Base error class for non-raising domain errors

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode, StatusClass
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "StatusClass",
    "Success",
]
