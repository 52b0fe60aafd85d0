"""Domain layer - Pure authorization vocabulary.

Enums, entities, value objects, errors, events, and protocols (ports). The
domain layer has NO dependencies on any framework or infrastructure.

Structure:
- enums/: Roles, permissions, resource actions, identifier sources
- entities/: AuthenticatedIdentity
- value_objects/: AuthorizationDecision, AuthorizationContext
- errors/: AuthorizationError, AuditError
- events/: AuthorizationEvaluated
- protocols/: Authorization, role resolver, audit, logger ports
"""
