"""Application services: enforcement guards and identifier extraction."""

from src.application.services.authorization_guard import AuthorizationGuard
from src.application.services.resource_identifier import (
    RequestParameters,
    extract_owner_id,
    parse_identifier,
)

__all__ = [
    "AuthorizationGuard",
    "RequestParameters",
    "extract_owner_id",
    "parse_identifier",
]
