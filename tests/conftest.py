"""Shared pytest fixtures.

Identities follow the default email-pattern role heuristic:
    user@example.com       -> user
    admin@example.com      -> admin
    superadmin@example.com -> super_admin

Policies and guards are built directly from their classes so every test
gets fresh collaborators and no container singleton leaks between tests.
"""

from unittest.mock import MagicMock

import pytest

from src.application.services.authorization_guard import AuthorizationGuard
from src.domain.entities import AuthenticatedIdentity
from src.infrastructure.audit import AuditLogger, InMemoryAuditAdapter
from src.infrastructure.authorization import (
    AuthorizationPolicy,
    EmailPatternRoleResolver,
    PermissionCatalog,
    default_catalog,
)


@pytest.fixture
def user_identity() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(id=1, email="user@example.com")


@pytest.fixture
def admin_identity() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(id=5, email="admin@example.com")


@pytest.fixture
def super_admin_identity() -> AuthenticatedIdentity:
    return AuthenticatedIdentity(id=9, email="superadmin@example.com", plan="pro")


@pytest.fixture
def catalog() -> PermissionCatalog:
    return default_catalog()


@pytest.fixture
def policy(catalog: PermissionCatalog) -> AuthorizationPolicy:
    return AuthorizationPolicy(catalog=catalog, role_resolver=EmailPatternRoleResolver())


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; ``bind`` returns the same mock so calls are visible."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def audit_sink() -> InMemoryAuditAdapter:
    return InMemoryAuditAdapter()


@pytest.fixture
def audit_logger(audit_sink: InMemoryAuditAdapter, mock_logger: MagicMock) -> AuditLogger:
    return AuditLogger(sink=audit_sink, logger=mock_logger)


@pytest.fixture
def guard(
    policy: AuthorizationPolicy,
    audit_logger: AuditLogger,
    mock_logger: MagicMock,
) -> AuthorizationGuard:
    return AuthorizationGuard(policy=policy, audit_logger=audit_logger, logger=mock_logger)
