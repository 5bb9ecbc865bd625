from typing import Generic, TypeVar

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

EntityT = TypeVar("EntityT", bound=SQLModel)


class SqlModelRepository(Generic[EntityT]):
    """Shared persistence steps of the SQLModel repositories.

    Writes are flushed, not committed; the unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, entity: EntityT) -> EntityT:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def _remove(self, entity: EntityT) -> None:
        await self.session.delete(entity)
        await self.session.flush()
