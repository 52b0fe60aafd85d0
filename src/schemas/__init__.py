"""Request/response schemas for API endpoints.

Schemas are kept separate from domain objects (HTTP-layer concerns only).
"""

from src.schemas.authorization_schemas import AuthorizationContextResponse

__all__ = ["AuthorizationContextResponse"]
