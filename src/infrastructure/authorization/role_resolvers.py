"""Role resolution strategies.

Both strategies implement RoleResolverProtocol and are total: they never
raise, and anything they cannot classify resolves to USER.
"""

from collections.abc import Iterable

from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import UserRole
from src.domain.protocols import RoleResolverProtocol

DEFAULT_SUPER_ADMIN_MARKERS: tuple[str, ...] = ("superadmin@", "root@")
DEFAULT_ADMIN_MARKERS: tuple[str, ...] = ("admin@", "support@")


class EmailPatternRoleResolver:
    """Derive the role from substrings of the identity's email.

    Super admin markers are tested first, so "superadmin@example.com" (which
    also contains "admin@") resolves to SUPER_ADMIN. Matching is
    case-insensitive.

    Args:
        super_admin_markers: Substrings granting SUPER_ADMIN.
        admin_markers: Substrings granting ADMIN.

    Example:
        >>> resolver = EmailPatternRoleResolver()
        >>> resolver.resolve_role(AuthenticatedIdentity(id=1, email="root@corp.io"))
        <UserRole.SUPER_ADMIN: 'super_admin'>
    """

    def __init__(
        self,
        *,
        super_admin_markers: Iterable[str] = DEFAULT_SUPER_ADMIN_MARKERS,
        admin_markers: Iterable[str] = DEFAULT_ADMIN_MARKERS,
    ) -> None:
        self._super_admin_markers = tuple(m.lower() for m in super_admin_markers)
        self._admin_markers = tuple(m.lower() for m in admin_markers)

    def resolve_role(self, identity: AuthenticatedIdentity) -> UserRole:
        email = (identity.email or "").lower()
        if any(marker in email for marker in self._super_admin_markers):
            return UserRole.SUPER_ADMIN
        if any(marker in email for marker in self._admin_markers):
            return UserRole.ADMIN
        return UserRole.USER


class _DefaultUserResolver:
    def resolve_role(self, identity: AuthenticatedIdentity) -> UserRole:
        return UserRole.USER


class StoredRoleResolver:
    """Use the role stored on the identity record.

    Identities without a stored role are delegated to ``fallback``; without a
    fallback they resolve to USER.

    Args:
        fallback: Resolver for identities lacking an explicit role.
    """

    def __init__(self, fallback: RoleResolverProtocol | None = None) -> None:
        self._fallback: RoleResolverProtocol = fallback or _DefaultUserResolver()

    def resolve_role(self, identity: AuthenticatedIdentity) -> UserRole:
        if identity.role is not None:
            return identity.role
        return self._fallback.resolve_role(identity)
