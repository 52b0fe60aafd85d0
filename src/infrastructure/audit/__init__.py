"""Audit infrastructure.

Sinks implementing AuditProtocol plus the AuditLogger dispatcher that
guards use to record decisions without blocking.
"""

from src.infrastructure.audit.audit_logger import AuditLogger
from src.infrastructure.audit.in_memory_adapter import InMemoryAuditAdapter
from src.infrastructure.audit.logging_audit_adapter import LoggingAuditAdapter

__all__ = ["AuditLogger", "InMemoryAuditAdapter", "LoggingAuditAdapter"]
