"""Audit action types for authorization decisions.

Every guard evaluation produces exactly one audit event whose action is one
of the members below.
"""

from enum import Enum


class AuditAction(str, Enum):
    """Outcome recorded for an authorization decision."""

    ACCESS_GRANTED = "access_granted"
    """Guard evaluated and the request was allowed to proceed."""

    ACCESS_DENIED = "access_denied"
    """Guard evaluated and raised an AuthorizationError (security event)."""
