import os
from typing import Optional

import pytest

os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_NAME", "user_registry_test")
os.environ.setdefault("DB_USER", "tests")
os.environ.setdefault("DB_PASS", "tests")

from user_registry.services.user_service import UserService

ACTIVE_MANAGER = "5b0c7a52-8d7e-4f51-9a43-0f1c2d3e4a01"
OTHER_MANAGER = "9e4d1f60-2b3a-4c8d-8e7f-6a5b4c3d2e02"
INACTIVE_MANAGER = "c1d2e3f4-a5b6-4c7d-9e8f-0a1b2c3d4e03"


class InMemoryManagerRepository:
    def __init__(self, managers: Optional[dict] = None):
        self.rows = {
            manager_id: {"manager_id": manager_id, "is_active": active}
            for manager_id, active in (managers or {}).items()
        }

    async def get_active_by_id(self, manager_id):
        row = self.rows.get(manager_id)
        return dict(row) if row and row["is_active"] else None

    async def count(self):
        return len(self.rows)

    async def list_active(self):
        return [dict(r) for _, r in sorted(self.rows.items()) if r["is_active"]]

    async def create(self, manager_id, is_active=True):
        self.rows[manager_id] = {"manager_id": manager_id, "is_active": is_active}
        return dict(self.rows[manager_id])


class InMemoryUserRepository:
    def __init__(self):
        self.rows = {}
        self.reassignments = []

    async def get_by_id(self, user_id):
        row = self.rows.get(user_id)
        return dict(row) if row else None

    async def get_active_by_id(self, user_id):
        row = self.rows.get(user_id)
        return dict(row) if row and row["is_active"] else None

    async def get_by_mobile(self, mob_num):
        matches = [r for r in self.rows.values() if r["mob_num"] == mob_num]
        matches.sort(key=lambda r: r["is_active"], reverse=True)
        return dict(matches[0]) if matches else None

    async def list_active(self, user_id=None, mob_num=None, manager_id=None):
        rows = [r for r in self.rows.values() if r["is_active"]]
        if user_id:
            rows = [r for r in rows if r["user_id"] == user_id]
        elif mob_num:
            rows = [r for r in rows if r["mob_num"] == mob_num]
        elif manager_id:
            rows = [r for r in rows if r["manager_id"] == manager_id]
        return [dict(r) for r in sorted(rows, key=lambda r: r["created_at"])]

    async def create(self, user_in):
        row = dict(user_in, is_active=True)
        self.rows[row["user_id"]] = row
        return dict(row)

    async def update(self, user_id, fields, updated_at):
        row = self.rows.get(user_id)
        if row is None:
            return None
        row.update(fields, updated_at=updated_at)
        return dict(row)

    async def delete(self, user_id):
        self.rows.pop(user_id, None)

    async def reassign(self, old_user_id, successor):
        self.rows[old_user_id]["is_active"] = False
        self.reassignments.append((old_user_id, successor["user_id"]))
        return await self.create(successor)


@pytest.fixture()
def manager_repo() -> InMemoryManagerRepository:
    return InMemoryManagerRepository({
        ACTIVE_MANAGER: True,
        OTHER_MANAGER: True,
        INACTIVE_MANAGER: False,
    })


@pytest.fixture()
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def user_service(user_repo, manager_repo) -> UserService:
    return UserService(user_repo, manager_repo)


@pytest.fixture()
def client(user_service):
    from fastapi.testclient import TestClient

    from user_registry.api.v1.deps import get_user_service
    from user_registry.main import app

    app.dependency_overrides[get_user_service] = lambda: user_service
    try:
        # no context manager: lifespan would open a real database pool
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
