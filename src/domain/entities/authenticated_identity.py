"""Authenticated identity supplied by the authentication layer.

The authorization core never creates or verifies identities. It receives one
per request from the external authentication collaborator (JWT middleware,
session lookup, etc.) and treats it as read-only.
"""

from dataclasses import dataclass

from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedIdentity:
    """Identity of the caller for a single authorization check.

    Attributes:
        id: User identifier; compared against resource owner ids.
        email: User email address; input to the email-pattern role heuristic.
        plan: Subscription tier. Carried for collaborators, unused by
            authorization decisions.
        role: Explicit stored role, if the authentication layer knows it.
            Only StoredRoleResolver reads it.

    Example:
        >>> identity = AuthenticatedIdentity(id=7, email="user@example.com")
        >>> identity.plan
        'free'
    """

    id: int
    email: str
    plan: str = "free"
    role: UserRole | None = None
