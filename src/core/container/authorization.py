"""Authorization dependency factories.

The permission catalog, role resolver and policy are immutable after
construction, so each is an app-scoped singleton shared by every request.

Usage:
    # Application Layer (direct use)
    guard = get_authorization_guard()
    guard.require_admin(identity)

    # Presentation Layer (FastAPI Depends)
    policy: AuthorizationProtocol = Depends(get_authorization_policy)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import RoleResolverKind, settings
from src.core.container.infrastructure import get_audit_logger, get_logger

if TYPE_CHECKING:
    from src.application.services.authorization_guard import AuthorizationGuard
    from src.domain.protocols.role_resolver_protocol import RoleResolverProtocol
    from src.infrastructure.authorization.authorization_policy import (
        AuthorizationPolicy,
    )
    from src.infrastructure.authorization.permission_catalog import (
        PermissionCatalog,
    )


# ============================================================================
# Authorization (catalog-backed RBAC)
# ============================================================================


@lru_cache()
def get_permission_catalog() -> "PermissionCatalog":
    """Return the role -> permission catalog.

    Raises:
        ValueError: If the catalog breaks the monotonic role invariant.
    """
    from src.infrastructure.authorization.permission_catalog import default_catalog

    return default_catalog()


@lru_cache()
def get_role_resolver() -> "RoleResolverProtocol":
    """Return the role resolver selected by ``settings.role_resolver``.

    - email_pattern: EmailPatternRoleResolver with the configured markers
    - stored: StoredRoleResolver, falling back to email patterns for
      identities without a stored role
    """
    from src.infrastructure.authorization.role_resolvers import (
        EmailPatternRoleResolver,
        StoredRoleResolver,
    )

    email_resolver = EmailPatternRoleResolver(
        super_admin_markers=settings.super_admin_email_markers,
        admin_markers=settings.admin_email_markers,
    )
    if settings.role_resolver is RoleResolverKind.STORED:
        return StoredRoleResolver(fallback=email_resolver)
    return email_resolver


@lru_cache()
def get_authorization_policy() -> "AuthorizationPolicy":
    """Return the AuthorizationPolicy singleton."""
    from src.infrastructure.authorization.authorization_policy import (
        AuthorizationPolicy,
    )

    return AuthorizationPolicy(
        catalog=get_permission_catalog(),
        role_resolver=get_role_resolver(),
    )


@lru_cache()
def get_authorization_guard() -> "AuthorizationGuard":
    """Return the audited AuthorizationGuard singleton."""
    from src.application.services.authorization_guard import AuthorizationGuard

    return AuthorizationGuard(
        policy=get_authorization_policy(),
        audit_logger=get_audit_logger(),
        logger=get_logger(),
    )
