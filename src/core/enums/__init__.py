"""Core enums package.

Usage:
    from src.core.enums import ErrorCode, Environment, StatusClass
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode
from src.core.enums.status_class import StatusClass

__all__ = ["ErrorCode", "Environment", "StatusClass"]
