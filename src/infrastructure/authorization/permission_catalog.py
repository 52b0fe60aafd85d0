"""Static role -> permission catalog.

The catalog is built once at startup and never mutated. It is injected into
AuthorizationPolicy instead of being read from a module global, so tests can
substitute their own tables.

Invariant (checked on construction), each higher role a strict superset:
    permissions(USER) ⊂ permissions(ADMIN) ⊂ permissions(SUPER_ADMIN)

Usage:
    catalog = default_catalog()
    catalog.permissions_for(UserRole.ADMIN)

    custom = PermissionCatalog({
        UserRole.USER: {Permission.READ_OWN_DATA},
        UserRole.ADMIN: {Permission.READ_OWN_DATA, Permission.MANAGE_USERS},
        UserRole.SUPER_ADMIN: set(Permission),
    })
"""

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from src.domain.enums import Permission, UserRole

USER_PERMISSIONS: frozenset[Permission] = frozenset(
    {
        Permission.READ_OWN_DATA,
        Permission.WRITE_OWN_DATA,
        Permission.DELETE_OWN_DATA,
        Permission.CREATE_TEAM,
        Permission.CREATE_IDEA,
        Permission.SHARE_IDEA,
        Permission.COMMENT_IDEA,
    }
)

ADMIN_PERMISSIONS: frozenset[Permission] = USER_PERMISSIONS | {
    Permission.READ_USER_DATA,
    Permission.MANAGE_USERS,
    Permission.VIEW_ANALYTICS,
    Permission.VIEW_SECURITY_LOGS,
    Permission.MANAGE_TEAM,
    Permission.INVITE_MEMBERS,
}

SUPER_ADMIN_PERMISSIONS: frozenset[Permission] = ADMIN_PERMISSIONS | {
    Permission.WRITE_USER_DATA,
    Permission.DELETE_USER_DATA,
    Permission.MANAGE_SYSTEM,
    Permission.MANAGE_SECURITY,
}

DEFAULT_ROLE_PERMISSIONS: Mapping[UserRole, frozenset[Permission]] = MappingProxyType(
    {
        UserRole.USER: USER_PERMISSIONS,
        UserRole.ADMIN: ADMIN_PERMISSIONS,
        UserRole.SUPER_ADMIN: SUPER_ADMIN_PERMISSIONS,
    }
)


class PermissionCatalog:
    """Immutable mapping from each role to its permission set.

    Args:
        role_permissions: Permission iterable for every UserRole.

    Raises:
        ValueError: If a role is missing, or a higher role lacks a permission
            held by a lower role or grants nothing beyond it.
    """

    __slots__ = ("_table",)

    def __init__(
        self, role_permissions: Mapping[UserRole, Iterable[Permission]]
    ) -> None:
        missing = [role.value for role in UserRole if role not in role_permissions]
        if missing:
            raise ValueError(f"Permission catalog is missing roles: {missing}")

        table = {
            role: frozenset(role_permissions[role]) for role in UserRole.ordered()
        }

        ordered = UserRole.ordered()
        for lower, higher in zip(ordered, ordered[1:]):
            dropped = table[lower] - table[higher]
            if dropped:
                names = sorted(p.value for p in dropped)
                raise ValueError(
                    f"Role {higher.value} must include every permission of "
                    f"{lower.value}; missing {names}"
                )
            if table[higher] == table[lower]:
                raise ValueError(
                    f"Role {higher.value} must grant more than {lower.value}"
                )

        self._table: Mapping[UserRole, frozenset[Permission]] = MappingProxyType(table)

    def permissions_for(self, role: UserRole) -> frozenset[Permission]:
        """Permission set granted to ``role``."""
        return self._table[role]

    def roles(self) -> tuple[UserRole, ...]:
        """Roles covered by the catalog, lowest first."""
        return tuple(self._table)

    def roles_granting(self, permission: Permission) -> tuple[UserRole, ...]:
        """Roles whose permission set contains ``permission``, lowest first."""
        return tuple(role for role, perms in self._table.items() if permission in perms)

    def as_mapping(self) -> Mapping[UserRole, frozenset[Permission]]:
        """Read-only view of the whole table."""
        return self._table

    def __repr__(self) -> str:
        sizes = ", ".join(f"{role.value}={len(p)}" for role, p in self._table.items())
        return f"PermissionCatalog({sizes})"


@lru_cache(maxsize=1)
def default_catalog() -> PermissionCatalog:
    """Process-wide catalog built from DEFAULT_ROLE_PERMISSIONS."""
    return PermissionCatalog(DEFAULT_ROLE_PERMISSIONS)
