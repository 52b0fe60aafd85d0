"""Authorization failure raised at the request boundary.

Unlike DomainError subclasses, AuthorizationError is an exception: guards
raise it so that no guarded logic runs after a denial. It is also the error
carried by ``Failure`` in the non-raising ``check_*`` API, so both paths share
one shape.

Every instance exposes the stable triple the transport layer renders:
``code`` (ErrorCode), ``status_class`` (400/401/403), and ``message``.

Usage:
    from src.domain.errors import AuthorizationError

    try:
        guard.require_admin(identity)
    except AuthorizationError as e:
        return problem_response(e.status_class, e.code.value, e.message)
"""

from collections.abc import Iterable
from typing import cast

from src.core.enums import ErrorCode, StatusClass
from src.domain.enums import Permission, ResourceAction, UserRole


class AuthorizationError(Exception):
    """Structured authorization failure.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to clients.
        details: Optional string context for logs and problem details.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        details: dict[str, str] | None = None,
    ) -> None:
        if code.status_class is None:
            raise ValueError(f"{code.name} is not an authorization error code")
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    @property
    def status_class(self) -> StatusClass:
        """Status class derived from the error code."""
        # Never None: __init__ rejects codes without a status class
        return cast(StatusClass, self.code.status_class)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"AuthorizationError(code={self.code.name}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthorizationError):
            return NotImplemented
        return (self.code, self.message, self.details) == (
            other.code,
            other.message,
            other.details,
        )

    __hash__ = Exception.__hash__

    # -----------------------------------------------------------------
    # Constructors (one per failure kind, keeps messages consistent)
    # -----------------------------------------------------------------

    @classmethod
    def auth_required(cls) -> "AuthorizationError":
        return cls(ErrorCode.AUTH_REQUIRED, "Authentication required")

    @classmethod
    def permission_denied(cls, permission: Permission) -> "AuthorizationError":
        return cls(
            ErrorCode.PERMISSION_DENIED,
            f"Access denied: {permission.value} permission required",
            details={"permission": permission.value},
        )

    @classmethod
    def any_permission_denied(
        cls, permissions: Iterable[Permission]
    ) -> "AuthorizationError":
        names = ", ".join(p.value for p in permissions)
        return cls(
            ErrorCode.PERMISSION_DENIED,
            f"Access denied: one of [{names}] permissions required",
            details={"permissions": names},
        )

    @classmethod
    def insufficient_role(cls, minimum: UserRole) -> "AuthorizationError":
        return cls(
            ErrorCode.INSUFFICIENT_ROLE,
            f"Access denied: {minimum.value} role or higher required",
            details={"required_role": minimum.value},
        )

    @classmethod
    def resource_access_denied(
        cls, owner_id: int, action: ResourceAction
    ) -> "AuthorizationError":
        return cls(
            ErrorCode.RESOURCE_ACCESS_DENIED,
            "Access denied: insufficient permissions for this resource",
            details={"owner_id": str(owner_id), "action": action.value},
        )

    @classmethod
    def self_or_admin_required(cls) -> "AuthorizationError":
        return cls(
            ErrorCode.SELF_OR_ADMIN_REQUIRED,
            "Access denied: can only access own resources or admin privileges required",
        )

    @classmethod
    def missing_identifier(cls, param_name: str) -> "AuthorizationError":
        return cls(
            ErrorCode.MISSING_RESOURCE_IDENTIFIER,
            f"Resource identifier '{param_name}' not found",
            details={"parameter": param_name},
        )

    @classmethod
    def malformed_identifier(cls, param_name: str) -> "AuthorizationError":
        return cls(
            ErrorCode.MALFORMED_RESOURCE_IDENTIFIER,
            f"Resource identifier '{param_name}' must be an integer",
            details={"parameter": param_name},
        )

    @classmethod
    def resource_not_loaded(cls) -> "AuthorizationError":
        return cls(
            ErrorCode.RESOURCE_NOT_LOADED,
            "Resource not found or not loaded",
        )

    @classmethod
    def ownership_unknown(cls, owner_field: str) -> "AuthorizationError":
        return cls(
            ErrorCode.RESOURCE_OWNERSHIP_UNKNOWN,
            "Resource does not have ownership information",
            details={"owner_field": owner_field},
        )
