"""API tests for the authorization dependencies.

A small FastAPI app stands in for a real service. Its middleware plays the
authentication layer: X-User-Id / X-User-Email headers become
``request.state.identity``; without them the request is anonymous.
"""

from collections.abc import Iterator
from typing import Annotated
from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from src.application.services import AuthorizationGuard
from src.core.container import get_authorization_guard
from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import Permission, ResourceAction, UserRole
from src.infrastructure.audit import AuditLogger, InMemoryAuditAdapter
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_admin,
    require_all_permissions,
    require_any_permission,
    require_permission,
    require_role,
    require_self_or_admin,
    require_super_admin,
    validate_own_resource,
    validate_resource_ownership,
)
from src.presentation.routers.api.v1.errors import register_exception_handlers

IDEAS = {1: {"id": 1, "user_id": 1}, 2: {"id": 2, "user_id": 2}}


def _build_app(guard: AuthorizationGuard) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.middleware("http")
    async def fake_authentication(request: Request, call_next):
        user_id = request.headers.get("X-User-Id")
        if user_id is not None:
            request.state.identity = AuthenticatedIdentity(
                id=int(user_id), email=request.headers.get("X-User-Email", "")
            )
        return await call_next(request)

    @app.get("/analytics", dependencies=[Depends(require_permission(Permission.VIEW_ANALYTICS))])
    async def analytics() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/teams",
        dependencies=[
            Depends(require_any_permission(Permission.MANAGE_TEAM, Permission.MANAGE_SYSTEM))
        ],
    )
    async def teams() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/security",
        dependencies=[
            Depends(
                require_all_permissions(Permission.VIEW_SECURITY_LOGS, Permission.MANAGE_SECURITY)
            )
        ],
    )
    async def security() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/members", dependencies=[Depends(require_role(UserRole.USER))])
    async def members() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/admin", dependencies=[Depends(require_admin())])
    async def admin() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/system", dependencies=[Depends(require_super_admin())])
    async def system() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/users/{userId}/profile")
    async def profile(
        target_id: Annotated[int, Depends(require_self_or_admin())],
    ) -> dict[str, int]:
        return {"user_id": target_id}

    @app.get("/profiles/{id}")
    async def profile_by_id(
        target_id: Annotated[int, Depends(require_self_or_admin())],
    ) -> dict[str, int]:
        return {"user_id": target_id}

    @app.get("/profiles")
    async def profile_without_path(
        target_id: Annotated[int, Depends(require_self_or_admin())],
    ) -> dict[str, int]:
        return {"user_id": target_id}

    @app.get("/users/{userId}/ideas")
    async def read_ideas(
        owner_id: Annotated[int, Depends(validate_resource_ownership())],
    ) -> dict[str, int]:
        return {"owner_id": owner_id}

    @app.post("/ideas")
    async def write_idea(
        owner_id: Annotated[
            int, Depends(validate_resource_ownership(action=ResourceAction.WRITE))
        ],
    ) -> dict[str, int]:
        return {"owner_id": owner_id}

    async def load_idea(idea_id: int, request: Request) -> None:
        request.state.resource = IDEAS.get(idea_id)

    @app.delete("/ideas/{idea_id}", dependencies=[Depends(load_idea)])
    async def delete_idea(
        owner_id: Annotated[
            int, Depends(validate_own_resource(action=ResourceAction.DELETE))
        ],
    ) -> dict[str, int]:
        return {"owner_id": owner_id}

    app.dependency_overrides[get_authorization_guard] = lambda: guard
    return app


@pytest.fixture
def client(policy) -> Iterator[TestClient]:
    logger = MagicMock()
    logger.bind.return_value = logger
    audit_logger = AuditLogger(sink=InMemoryAuditAdapter(), logger=logger)
    guard = AuthorizationGuard(policy=policy, audit_logger=audit_logger, logger=logger)
    with TestClient(_build_app(guard)) as test_client:
        yield test_client


USER = {"X-User-Id": "1", "X-User-Email": "user@example.com"}
ADMIN = {"X-User-Id": "5", "X-User-Email": "admin@example.com"}
SUPER_ADMIN = {"X-User-Id": "9", "X-User-Email": "superadmin@example.com"}


@pytest.mark.api
class TestPermissionAndRoleDependencies:
    @pytest.mark.parametrize(
        ("path", "headers", "expected"),
        [
            ("/analytics", USER, 403),
            ("/analytics", ADMIN, 200),
            ("/teams", USER, 403),
            ("/teams", ADMIN, 200),
            ("/security", ADMIN, 403),
            ("/security", SUPER_ADMIN, 200),
            ("/members", USER, 200),
            ("/admin", USER, 403),
            ("/admin", ADMIN, 200),
            ("/system", ADMIN, 403),
            ("/system", SUPER_ADMIN, 200),
        ],
    )
    def test_status(
        self, client: TestClient, path: str, headers: dict[str, str], expected: int
    ) -> None:
        response = client.get(path, headers=headers)
        assert response.status_code == expected

    @pytest.mark.parametrize(
        "path", ["/analytics", "/teams", "/security", "/members", "/admin", "/system"]
    )
    def test_anonymous_gets_401(self, client: TestClient, path: str) -> None:
        response = client.get(path)

        assert response.status_code == 401
        assert response.json()["code"] == "auth_required"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_denial_codes(self, client: TestClient) -> None:
        assert client.get("/analytics", headers=USER).json()["code"] == "permission_denied"
        assert client.get("/admin", headers=USER).json()["code"] == "insufficient_role"


@pytest.mark.api
class TestSelfOrAdminDependency:
    def test_self(self, client: TestClient) -> None:
        response = client.get("/users/1/profile", headers=USER)
        assert response.status_code == 200
        assert response.json() == {"user_id": 1}

    def test_other_user(self, client: TestClient) -> None:
        response = client.get("/users/2/profile", headers=USER)
        assert response.status_code == 403
        assert response.json()["code"] == "self_or_admin_required"

    def test_admin(self, client: TestClient) -> None:
        response = client.get("/users/2/profile", headers=ADMIN)
        assert response.json() == {"user_id": 2}

    def test_id_alias(self, client: TestClient) -> None:
        assert client.get("/profiles/1", headers=USER).json() == {"user_id": 1}

    def test_malformed(self, client: TestClient) -> None:
        response = client.get("/users/abc/profile", headers=ADMIN)
        assert response.status_code == 400
        assert response.json()["code"] == "malformed_resource_identifier"

    def test_query_is_ignored(self, client: TestClient) -> None:
        response = client.get("/profiles", params={"userId": "1"}, headers=USER)
        assert response.status_code == 400
        assert response.json()["code"] == "missing_resource_identifier"

    def test_anonymous_with_malformed_id(self, client: TestClient) -> None:
        response = client.get("/users/abc/profile")
        assert response.status_code == 401


@pytest.mark.api
class TestResourceOwnershipDependency:
    def test_owner_reads(self, client: TestClient) -> None:
        response = client.get("/users/1/ideas", headers=USER)
        assert response.json() == {"owner_id": 1}

    def test_admin_reads_other(self, client: TestClient) -> None:
        assert client.get("/users/2/ideas", headers=ADMIN).status_code == 200

    def test_user_reads_other(self, client: TestClient) -> None:
        response = client.get("/users/2/ideas", headers=USER)
        assert response.status_code == 403
        assert response.json()["code"] == "resource_access_denied"

    def test_malformed_path_id_is_400_for_everyone(self, client: TestClient) -> None:
        for headers in (USER, ADMIN, SUPER_ADMIN):
            response = client.get("/users/12abc/ideas", headers=headers)
            assert response.status_code == 400
            assert response.json()["code"] == "malformed_resource_identifier"

    def test_oversized_path_id_is_400(self, client: TestClient) -> None:
        response = client.get(f"/users/{'9' * 5000}/ideas", headers=ADMIN)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "malformed_resource_identifier"
        assert body["status"] == 400

    def test_owner_from_json_body(self, client: TestClient) -> None:
        response = client.post("/ideas", json={"userId": 1, "title": "x"}, headers=USER)
        assert response.json() == {"owner_id": 1}

    def test_body_wins_over_query(self, client: TestClient) -> None:
        response = client.post(
            "/ideas", json={"userId": 1}, params={"userId": "2"}, headers=USER
        )
        assert response.status_code == 200

    def test_owner_from_query(self, client: TestClient) -> None:
        response = client.post("/ideas", params={"userId": "1"}, headers=USER)
        assert response.json() == {"owner_id": 1}

    def test_admin_write_on_other_denied(self, client: TestClient) -> None:
        response = client.post("/ideas", json={"userId": 1}, headers=ADMIN)
        assert response.status_code == 403

    def test_super_admin_write_on_other(self, client: TestClient) -> None:
        response = client.post("/ideas", json={"userId": 1}, headers=SUPER_ADMIN)
        assert response.status_code == 200

    def test_non_object_body_is_ignored(self, client: TestClient) -> None:
        response = client.post("/ideas", json=[{"userId": 1}], headers=USER)
        assert response.status_code == 400
        assert response.json()["code"] == "missing_resource_identifier"

    def test_non_json_body_is_ignored(self, client: TestClient) -> None:
        response = client.post(
            "/ideas",
            content=b"userId=1",
            params={"userId": "1"},
            headers={**USER, "Content-Type": "text/plain"},
        )
        assert response.json() == {"owner_id": 1}


@pytest.mark.api
class TestOwnResourceDependency:
    def test_owner_deletes(self, client: TestClient) -> None:
        assert client.delete("/ideas/1", headers=USER).json() == {"owner_id": 1}

    def test_other_user_denied(self, client: TestClient) -> None:
        assert client.delete("/ideas/2", headers=USER).status_code == 403

    def test_resource_not_loaded(self, client: TestClient) -> None:
        response = client.delete("/ideas/404", headers=USER)
        assert response.status_code == 400
        assert response.json()["code"] == "resource_not_loaded"
