"""Pytest fixtures for wikiguard tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from wikiguard.domain.entities import EditLock, Group, PagePermission, StoredPermission
from wikiguard.domain.permission_registry import PermissionRegistry
from wikiguard.infrastructure.permission.authorization_resolver import (
    GroupAuthorizationResolver,
)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission store keyed by identifier."""

    def __init__(self) -> None:
        self._by_name: dict[str, StoredPermission] = {}

    async def list_all(self) -> list[StoredPermission]:
        return sorted(self._by_name.values(), key=lambda p: p.name)

    async def get_by_name(self, name: str) -> StoredPermission | None:
        return self._by_name.get(name)

    async def create(self, permission: StoredPermission) -> StoredPermission:
        self._by_name[permission.name] = permission
        return permission

    async def update_description(self, permission_id: UUID, description: str | None) -> None:
        for p in self._by_name.values():
            if p.id == permission_id:
                p.description = description

    async def delete(self, permission_id: UUID) -> None:
        self._by_name = {n: p for n, p in self._by_name.items() if p.id != permission_id}

    def name_of(self, permission_id: UUID) -> str | None:
        for p in self._by_name.values():
            if p.id == permission_id:
                return p.name
        return None

    def add(self, name: str, description: str | None = None) -> StoredPermission:
        module, resource, action = name.split(":")
        p = StoredPermission(
            id=uuid4(),
            name=name,
            module=module,
            resource=resource,
            action=action,
            description=description,
        )
        self._by_name[name] = p
        return p


class FakeGroupRepository:
    """In-memory groups with memberships and grants.

    Grants of deleted permissions disappear, like ON DELETE CASCADE.
    """

    def __init__(self, permissions_repo: FakePermissionRepository) -> None:
        self._permissions = permissions_repo
        self._by_id: dict[UUID, Group] = {}
        self._members: dict[UUID, set[int]] = {}
        self._grants: dict[UUID, set[UUID]] = {}

    async def get_by_id(self, group_id: UUID) -> Group | None:
        return self._by_id.get(group_id)

    async def get_by_name(self, name: str) -> Group | None:
        for g in self._by_id.values():
            if g.name == name:
                return g
        return None

    async def list_for_user(self, user_id: int) -> list[Group]:
        return [
            g
            for g in sorted(self._by_id.values(), key=lambda g: g.name)
            if user_id in self._members.get(g.id, set())
        ]

    async def create(self, group: Group) -> Group:
        self._by_id[group.id] = group
        self._members.setdefault(group.id, set())
        self._grants.setdefault(group.id, set())
        return group

    async def delete(self, group_id: UUID) -> None:
        self._by_id.pop(group_id, None)
        self._members.pop(group_id, None)
        self._grants.pop(group_id, None)

    async def list_permission_names(self, group_ids: Sequence[UUID]) -> list[str]:
        names: set[str] = set()
        for gid in group_ids:
            for pid in self._grants.get(gid, set()):
                name = self._permissions.name_of(pid)
                if name is not None:
                    names.add(name)
        return sorted(names)

    async def add_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None:
        self._grants.setdefault(group_id, set()).update(permission_ids)

    async def remove_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None:
        self._grants.get(group_id, set()).difference_update(permission_ids)

    async def list_member_ids(self, group_id: UUID) -> list[int]:
        return sorted(self._members.get(group_id, set()))

    async def add_members(self, group_id: UUID, user_ids: Sequence[int]) -> None:
        self._members.setdefault(group_id, set()).update(user_ids)

    async def remove_members(self, group_id: UUID, user_ids: Sequence[int]) -> None:
        self._members.get(group_id, set()).difference_update(user_ids)


class FakePageLockRepository:
    """In-memory lock columns per page.

    Methods never await before mutating, so each call is atomic on the event
    loop, matching the row-locked read and update of the real repository.
    """

    def __init__(self) -> None:
        self._pages: dict[int, EditLock] = {}
        self.clear_calls: list[tuple[int, int]] = []

    def add_page(self, page_id: int) -> None:
        self._pages[page_id] = EditLock(page_id=page_id)

    async def get(self, page_id: int) -> EditLock | None:
        lock = self._pages.get(page_id)
        return replace(lock) if lock else None

    async def try_acquire(
        self,
        page_id: int,
        user_id: int,
        now: datetime,
        expires_at: datetime,
    ) -> EditLock | None:
        lock = self._pages.get(page_id)
        if lock is None:
            return None
        if lock.is_held(now) and lock.holder_user_id != user_id:
            return replace(lock)
        acquired_at = lock.acquired_at if lock.is_held_by(user_id, now) else now
        self._pages[page_id] = EditLock(page_id, user_id, acquired_at, expires_at)
        return replace(self._pages[page_id])

    async def clear(self, page_id: int, holder_user_id: int) -> bool:
        self.clear_calls.append((page_id, holder_user_id))
        lock = self._pages.get(page_id)
        if lock is None or lock.holder_user_id != holder_user_id:
            return False
        self._pages[page_id] = EditLock(page_id=page_id)
        return True

    async def list_active(self, now: datetime, limit: int) -> list[EditLock]:
        active = [replace(lock) for lock in self._pages.values() if lock.is_held(now)]
        active.sort(key=lambda lock: (-lock.acquired_at.timestamp(), lock.page_id))
        return active[:limit]


class FakePagePermissionRepository:
    """In-memory page overrides."""

    def __init__(self) -> None:
        self._store: dict[UUID, PagePermission] = {}

    async def list_applicable(
        self,
        page_id: int,
        permission_name: str,
        group_ids: Sequence[UUID],
    ) -> list[PagePermission]:
        return [
            o
            for o in self._store.values()
            if o.page_id == page_id
            and o.permission_name == permission_name
            and (o.group_id is None or o.group_id in group_ids)
        ]

    async def get(
        self,
        page_id: int,
        permission_name: str,
        group_id: UUID | None,
    ) -> PagePermission | None:
        for o in self._store.values():
            if (o.page_id, o.permission_name, o.group_id) == (page_id, permission_name, group_id):
                return o
        return None

    async def create(self, override: PagePermission) -> PagePermission:
        self._store[override.id] = override
        return override

    async def update(self, override: PagePermission) -> None:
        self._store[override.id] = override

    async def delete(self, override_id: UUID) -> None:
        self._store.pop(override_id, None)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.groups = FakeGroupRepository(self.permissions)
        self.page_locks = FakePageLockRepository()
        self.page_permissions = FakePagePermissionRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass

    async def add_group(
        self,
        name: str,
        permissions: Sequence[str] = (),
        members: Sequence[int] = (),
        **kwargs: object,
    ) -> Group:
        """Create a group holding permissions (created in the store if needed)."""
        group = await self.groups.create(
            Group(id=uuid4(), name=name, description=None, created_at=datetime.now(UTC), **kwargs)
        )
        ids = []
        for name_ in permissions:
            stored = await self.permissions.get_by_name(name_) or self.permissions.add(name_)
            ids.append(stored.id)
        await self.groups.add_permissions(group.id, ids)
        await self.groups.add_members(group.id, list(members))
        return group


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory whose every call yields the same FakeUnitOfWork, committing on success."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow
        await uow.commit()

    return factory


class FakeClock:
    """Clock under test control."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def registry() -> PermissionRegistry:
    """Registry over the built-in catalog."""
    return PermissionRegistry()


@pytest.fixture
def resolver(uow_factory, registry: PermissionRegistry) -> GroupAuthorizationResolver:
    return GroupAuthorizationResolver(uow_factory, registry, guest_group_name="Guests")


@pytest.fixture
def mock_resolver():
    """AsyncMock for AuthorizationResolver - grants everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.has_permission.return_value = True
    return mock
