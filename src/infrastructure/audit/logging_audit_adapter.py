"""Structured-log audit sink.

Writes each authorization decision as one ``authorization_decision`` log
line. Granted decisions log at INFO, denials at WARNING so they surface in
default log filters.

Implementation does NOT inherit from AuditProtocol (PEP 544).
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AuditError
from src.domain.events import AuthorizationEvaluated
from src.domain.protocols import LoggerProtocol


class LoggingAuditAdapter:
    """Audit sink backed by the structured logger.

    Attributes:
        _logger: Logger bound with ``component="audit"``.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger.bind(component="audit")

    async def record(self, event: AuthorizationEvaluated) -> Result[None, AuditError]:
        try:
            if event.allowed:
                self._logger.info("authorization_decision", **event.to_context())
            else:
                self._logger.warning("authorization_decision", **event.to_context())
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to write audit log line: {e}",
                    details={
                        "event_id": str(event.event_id),
                        "error_type": type(e).__name__,
                    },
                )
            )
        return Success(value=None)
