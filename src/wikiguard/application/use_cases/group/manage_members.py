"""Add and remove group members use cases."""

from collections.abc import Sequence
from uuid import UUID

from wikiguard.application.dto.group_dto import ChangeCount
from wikiguard.application.ports import AuthorizationResolver
from wikiguard.domain.exceptions import Forbidden, NotFound, ValidationError
from wikiguard.domain.value_objects import Subject


class AddGroupMembersUseCase:
    """Add users to a group, skipping existing members."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    async def execute(
        self,
        actor: Subject,
        group_id: UUID,
        user_ids: Sequence[int],
    ) -> ChangeCount:
        if not await self._resolver.has_permission(actor, "system:groups:update"):
            raise Forbidden("Actor cannot update groups")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Group", str(group_id))
            if not group.allow_user_assignment:
                raise ValidationError(f'Users cannot be assigned to the group "{group.name}"')

            existing = set(await uow.groups.list_member_ids(group_id))
            new_ids = list(dict.fromkeys(u for u in user_ids if u not in existing))
            if new_ids:
                await uow.groups.add_members(group_id, new_ids)
            return ChangeCount(added=len(new_ids))


class RemoveGroupMembersUseCase:
    """Remove users from a group. Non-members are ignored."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    async def execute(
        self,
        actor: Subject,
        group_id: UUID,
        user_ids: Sequence[int],
    ) -> ChangeCount:
        if not await self._resolver.has_permission(actor, "system:groups:update"):
            raise Forbidden("Actor cannot update groups")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Group", str(group_id))

            existing = set(await uow.groups.list_member_ids(group_id))
            to_remove = [u for u in dict.fromkeys(user_ids) if u in existing]
            if to_remove:
                await uow.groups.remove_members(group_id, to_remove)
            return ChangeCount(removed=len(to_remove))
