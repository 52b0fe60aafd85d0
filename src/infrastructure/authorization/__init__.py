"""Authorization infrastructure.

Catalog-backed RBAC: the static permission catalog, role resolution
strategies, and the AuthorizationPolicy decision engine.
"""

from src.infrastructure.authorization.authorization_policy import AuthorizationPolicy
from src.infrastructure.authorization.permission_catalog import (
    DEFAULT_ROLE_PERMISSIONS,
    PermissionCatalog,
    default_catalog,
)
from src.infrastructure.authorization.role_resolvers import (
    EmailPatternRoleResolver,
    StoredRoleResolver,
)

__all__ = [
    "AuthorizationPolicy",
    "DEFAULT_ROLE_PERMISSIONS",
    "EmailPatternRoleResolver",
    "PermissionCatalog",
    "StoredRoleResolver",
    "default_catalog",
]
