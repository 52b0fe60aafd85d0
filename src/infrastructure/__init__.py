"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- authorization/: Permission catalog, role resolvers, AuthorizationPolicy
- audit/: Audit sinks and the non-blocking AuditLogger
- logging/: structlog-based LoggerProtocol adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
