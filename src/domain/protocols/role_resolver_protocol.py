"""Role resolver protocol (port).

Isolates HOW a role is derived from an identity. Policy and guard code only
ever see the resulting UserRole, so the email heuristic can be replaced by a
stored-role lookup without touching them.

Implementations:
    - EmailPatternRoleResolver: email marker heuristic (default)
    - StoredRoleResolver: explicit ``identity.role`` with fallback
"""

from typing import Protocol

from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import UserRole


class RoleResolverProtocol(Protocol):
    """Derives a role for an authenticated identity.

    Contract:
        - Deterministic and pure: same identity, same role.
        - Total: never raises; unmatched identities resolve to USER.
        - Never called with None (callers check authentication first).
    """

    def resolve_role(self, identity: AuthenticatedIdentity) -> UserRole:
        """Return the role for ``identity``."""
        ...
