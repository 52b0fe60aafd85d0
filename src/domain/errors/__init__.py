"""Domain errors.

Exports:
    AuthorizationError: Raised by guards, carried by Failure in check_* APIs
    AuditError: Returned by audit sinks (railway-oriented, never raised)
"""

from src.domain.errors.audit_error import AuditError
from src.domain.errors.authorization_error import AuthorizationError

__all__ = ["AuditError", "AuthorizationError"]
