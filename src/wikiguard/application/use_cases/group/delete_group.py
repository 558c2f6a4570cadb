"""Delete group use case."""

from uuid import UUID

from wikiguard.application.ports import AuthorizationResolver
from wikiguard.domain.exceptions import Forbidden, NotFound
from wikiguard.domain.value_objects import Subject


class DeleteGroupUseCase:
    """Delete a group along with its memberships and grants."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    async def execute(self, actor: Subject, group_id: UUID) -> None:
        """Delete group. System groups cannot be deleted."""
        if not await self._resolver.has_permission(actor, "system:groups:delete"):
            raise Forbidden("Actor cannot delete groups")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Group", str(group_id))
            if group.is_system:
                raise Forbidden(f"System group cannot be deleted: {group.name}")
            await uow.groups.delete(group_id)
