"""Authorization domain events.

One AuthorizationEvaluated event is emitted for every guard evaluation,
granted or denied. The event is observational only: it is produced after the
decision is final and is handed to the AuditLogger, which may drop it.

Reference:
    - src/application/services/authorization_guard.py
    - src/infrastructure/audit/audit_logger.py
"""

from dataclasses import dataclass
from datetime import datetime

from src.core.enums import ErrorCode
from src.domain.enums import AuditAction, UserRole
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class AuthorizationEvaluated(DomainEvent):
    """A guard evaluated an authorization question.

    Attributes:
        action: Guard that ran, e.g. "require_permission:manage_users".
        identity_id: Caller id, None when no identity was supplied.
        role: Resolved role, None when no identity was supplied.
        decision: ACCESS_GRANTED or ACCESS_DENIED.
        error_code: Denial code, None when granted.
        resource_ref: Target description, e.g. "user:42", if any.
    """

    action: str
    identity_id: int | None
    role: UserRole | None
    decision: AuditAction
    error_code: ErrorCode | None = None
    resource_ref: str | None = None

    @property
    def timestamp(self) -> datetime:
        """When the decision was made (alias of occurred_at)."""
        return self.occurred_at

    @property
    def allowed(self) -> bool:
        return self.decision is AuditAction.ACCESS_GRANTED

    def to_context(self) -> dict[str, str | int | None]:
        """Flatten the event into structured logging context."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.occurred_at.isoformat(),
            "authz_action": self.action,
            "identity_id": self.identity_id,
            "role": self.role.value if self.role else None,
            "decision": self.decision.value,
            "error_code": self.error_code.value if self.error_code else None,
            "resource_ref": self.resource_ref,
        }
