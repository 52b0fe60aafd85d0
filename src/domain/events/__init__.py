"""Domain events.

Exports:
    DomainEvent: Base class (event_id, occurred_at)
    AuthorizationEvaluated: Audit event for every guard evaluation
"""

from src.domain.events.authorization_events import AuthorizationEvaluated
from src.domain.events.base_event import DomainEvent

__all__ = ["AuthorizationEvaluated", "DomainEvent"]
