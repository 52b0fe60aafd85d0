"""Base domain event class.

Domain events represent "things that happened" and are always named in past
tense (e.g., AuthorizationEvaluated).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for ordering

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class SomethingHappened(DomainEvent):
    ...     user_id: int
    >>>
    >>> event = SomethingHappened(user_id=1)
    >>> event.event_id  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            time-ordered UUID v7 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid7)  # type: ignore[arg-type]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
