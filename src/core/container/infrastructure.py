"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Audit sink and the non-blocking AuditLogger

Tests reset a singleton with ``get_xxx.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.audit_protocol import AuditProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.audit.audit_logger import AuditLogger


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )


@lru_cache()
def get_audit_sink() -> "AuditProtocol":
    """Return the audit sink singleton.

    Authorization decisions are written to the structured log. Storage and
    retention are left to whatever ships the logs.
    """
    from src.infrastructure.audit.logging_audit_adapter import LoggingAuditAdapter

    return LoggingAuditAdapter(logger=get_logger())


@lru_cache()
def get_audit_logger() -> "AuditLogger":
    """Return the AuditLogger dispatcher singleton.

    Honors ``settings.audit_enabled``. The FastAPI lifespan calls
    ``shutdown()`` on it so queued events are flushed on exit.
    """
    from src.infrastructure.audit.audit_logger import AuditLogger

    return AuditLogger(
        sink=get_audit_sink(),
        logger=get_logger(),
        enabled=settings.audit_enabled,
    )
