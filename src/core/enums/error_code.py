"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention. Values are stable
strings and are safe to expose to clients.

Categories:
- Authentication (AUTH_REQUIRED)
- Authorization denials (PERMISSION_DENIED, INSUFFICIENT_ROLE, ...)
- Request shape (MISSING_*, MALFORMED_*, RESOURCE_NOT_LOADED, ...)
- Audit trail (AUDIT_*)
"""

from enum import Enum

from src.core.enums.status_class import StatusClass


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Authentication
    AUTH_REQUIRED = "auth_required"

    # Authorization denials
    PERMISSION_DENIED = "permission_denied"
    INSUFFICIENT_ROLE = "insufficient_role"
    RESOURCE_ACCESS_DENIED = "resource_access_denied"
    SELF_OR_ADMIN_REQUIRED = "self_or_admin_required"

    # Request shape (evaluated before any ownership decision)
    MISSING_RESOURCE_IDENTIFIER = "missing_resource_identifier"
    MALFORMED_RESOURCE_IDENTIFIER = "malformed_resource_identifier"
    RESOURCE_NOT_LOADED = "resource_not_loaded"
    RESOURCE_OWNERSHIP_UNKNOWN = "resource_ownership_unknown"

    # Audit trail
    AUDIT_RECORD_FAILED = "audit_record_failed"

    @property
    def status_class(self) -> StatusClass | None:
        """Status class for authorization codes, None for internal codes."""
        return _STATUS_CLASSES.get(self)


_STATUS_CLASSES: dict[ErrorCode, StatusClass] = {
    ErrorCode.AUTH_REQUIRED: StatusClass.UNAUTHENTICATED,
    ErrorCode.PERMISSION_DENIED: StatusClass.FORBIDDEN,
    ErrorCode.INSUFFICIENT_ROLE: StatusClass.FORBIDDEN,
    ErrorCode.RESOURCE_ACCESS_DENIED: StatusClass.FORBIDDEN,
    ErrorCode.SELF_OR_ADMIN_REQUIRED: StatusClass.FORBIDDEN,
    ErrorCode.MISSING_RESOURCE_IDENTIFIER: StatusClass.BAD_REQUEST,
    ErrorCode.MALFORMED_RESOURCE_IDENTIFIER: StatusClass.BAD_REQUEST,
    ErrorCode.RESOURCE_NOT_LOADED: StatusClass.BAD_REQUEST,
    ErrorCode.RESOURCE_OWNERSHIP_UNKNOWN: StatusClass.BAD_REQUEST,
}
