"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_authorization_guard

The container is organized into modules by concern:
- infrastructure: Logging, audit sink, audit dispatcher
- authorization: Permission catalog, role resolver, policy, guard
"""

from src.core.container.authorization import (
    get_authorization_guard,
    get_authorization_policy,
    get_permission_catalog,
    get_role_resolver,
)
from src.core.container.infrastructure import (
    get_audit_logger,
    get_audit_sink,
    get_logger,
)

__all__ = [
    "get_audit_logger",
    "get_audit_sink",
    "get_authorization_guard",
    "get_authorization_policy",
    "get_logger",
    "get_permission_catalog",
    "get_role_resolver",
]
