"""HTTP status classes reported by authorization failures.

The authorization core never renders responses. It only classifies each
failure so the transport layer can pick a status code.
"""

from enum import IntEnum


class StatusClass(IntEnum):
    """Status class attached to every authorization error code."""

    BAD_REQUEST = 400
    """Request is malformed (missing or unparseable identifiers)."""

    UNAUTHENTICATED = 401
    """No authenticated identity was supplied."""

    FORBIDDEN = 403
    """Identity is known but the action is not permitted."""
