"""SQLAlchemy unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits or rolls back the request's database session.

    Advisory and row locks taken inside the block are released by the
    commit or rollback.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.info("Transaction committed")

    async def rollback(self) -> None:
        await self.session.rollback()
        logfire.info("Transaction rolled back")
