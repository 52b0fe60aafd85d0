"""Snapshot of what an identity is allowed to do."""

from dataclasses import dataclass

from src.domain.enums import Permission, UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationContext:
    """Role and effective permissions resolved for one identity.

    Handed to request handlers that branch on capabilities (e.g. showing
    admin-only fields) without running a guard.

    Attributes:
        identity_id: Identifier of the described identity.
        role: Resolved role.
        permissions: Effective permission set for the role.
    """

    identity_id: int
    role: UserRole
    permissions: frozenset[Permission]

    def sorted_permissions(self) -> list[str]:
        """Permission values in stable alphabetical order."""
        return sorted(permission.value for permission in self.permissions)
