"""Domain protocols (ports).

Exports:
    AuthorizationProtocol: Decision engine (predicates, checks, assertions)
    RoleResolverProtocol: Identity -> role strategy
    AuditProtocol: Audit event sink
    LoggerProtocol: Structured logging
"""

from src.domain.protocols.audit_protocol import AuditProtocol
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_resolver_protocol import RoleResolverProtocol

__all__ = [
    "AuditProtocol",
    "AuthorizationProtocol",
    "LoggerProtocol",
    "RoleResolverProtocol",
]
