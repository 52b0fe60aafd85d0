"""Domain entities.

Pure data with no framework dependencies.
"""

from src.domain.entities.authenticated_identity import AuthenticatedIdentity

__all__ = ["AuthenticatedIdentity"]
