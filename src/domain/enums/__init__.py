"""Domain enums for authorization.

Available Enums:
    - UserRole: Ordered RBAC roles (user < admin < super_admin)
    - Permission: Named capabilities granted through the catalog
    - ResourceAction: read/write/delete on user-owned resources
    - IdentifierSource: Request locations for owner identifiers
    - AuditAction: Recorded outcome of an authorization decision
"""

from src.domain.enums.audit_action import AuditAction
from src.domain.enums.identifier_source import (
    DEFAULT_IDENTIFIER_SOURCES,
    IdentifierSource,
)
from src.domain.enums.permission import Permission
from src.domain.enums.resource_action import ResourceAction
from src.domain.enums.user_role import UserRole

__all__ = [
    "AuditAction",
    "DEFAULT_IDENTIFIER_SOURCES",
    "IdentifierSource",
    "Permission",
    "ResourceAction",
    "UserRole",
]
