"""Audit sink protocol (port) for authorization decisions.

The sink is the external collaborator that accepts audit events. Storage,
retention, and querying are outside this project; the only contract is
"accept an event".

Implementations:
    - LoggingAuditAdapter: Writes events through the structured logger
    - InMemoryAuditAdapter: Keeps events in a list (tests, development)

Error Handling:
    ``record`` returns a Result. Implementations should wrap failures in
    ``Failure(error=AuditError(...))``; the AuditLogger also guards against
    sinks that raise anyway.
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import AuditError
from src.domain.events import AuthorizationEvaluated


class AuditProtocol(Protocol):
    """Protocol for audit event sinks."""

    async def record(
        self, event: AuthorizationEvaluated
    ) -> Result[None, AuditError]:
        """Accept one authorization audit event.

        Args:
            event: The decision to record.

        Returns:
            Result[None, AuditError]:
                - Success(value=None) if the event was accepted
                - Failure(error=AuditError) if the sink rejected it
        """
        ...
