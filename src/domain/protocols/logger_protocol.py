"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Messages are snake_case event keys
("authorization_decision", "audit_dispatch_failed") and everything else goes
in key/value context.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Granted decisions, startup events
    - WARNING: Denied decisions, dropped audit events
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Security:
    - NEVER log tokens or credentials
    - Identities are logged by id, not by email

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("permission_catalog_loaded", roles=3)

    scoped = logger.bind(identity_id=identity.id)
    scoped.warning("authorization_decision", decision="access_denied")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event key.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The receiving logger is unchanged (immutable pattern).
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
