"""In-memory audit sink.

Keeps every recorded event in a list. Used by the test suite and handy in
development when you want to inspect decisions without parsing logs.
"""

from src.core.result import Result, Success
from src.domain.errors import AuditError
from src.domain.events import AuthorizationEvaluated


class InMemoryAuditAdapter:
    """Audit sink that appends events to ``self.events``."""

    def __init__(self) -> None:
        self.events: list[AuthorizationEvaluated] = []

    async def record(self, event: AuthorizationEvaluated) -> Result[None, AuditError]:
        self.events.append(event)
        return Success(value=None)

    def clear(self) -> None:
        self.events.clear()
