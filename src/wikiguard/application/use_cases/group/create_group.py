"""Create group use case."""

from datetime import UTC, datetime
from uuid import uuid4

from wikiguard.application.dto.group_dto import GroupCreateInput
from wikiguard.application.ports import AuthorizationResolver
from wikiguard.domain.entities import Group
from wikiguard.domain.exceptions import Forbidden, ValidationError
from wikiguard.domain.value_objects import Subject


class CreateGroupUseCase:
    """Create a user-managed group."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver

    async def execute(self, actor: Subject, input_data: GroupCreateInput) -> Group:
        """Create group. Actor must have system:groups:create."""
        if not await self._resolver.has_permission(actor, "system:groups:create"):
            raise Forbidden("Actor cannot create groups")

        name = input_data.name.strip()
        if not name:
            raise ValidationError("Group name must not be empty")

        async with self._uow_factory() as uow:
            if await uow.groups.get_by_name(name):
                raise ValidationError(f"Group already exists: {name}")
            group = Group(
                id=uuid4(),
                name=name,
                description=input_data.description,
                created_at=datetime.now(UTC),
                is_system=False,
                is_editable=True,
                allow_user_assignment=input_data.allow_user_assignment,
            )
            return await uow.groups.create(group)
