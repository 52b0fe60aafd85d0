"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.authorization_context import AuthorizationContext
from src.domain.value_objects.authorization_decision import AuthorizationDecision

__all__ = ["AuthorizationContext", "AuthorizationDecision"]
