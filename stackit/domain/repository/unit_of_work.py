"""Unit of work interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Self


class UnitOfWork(ABC):
    """One transaction around a use case.

    Use as ``async with unit_of_work:``. The block commits when it exits
    normally and rolls back when it raises, so the outcome is settled
    before a response is built. Locks taken by repositories inside the
    block are released at that point.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the changes of the current transaction permanent."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard the changes of the current transaction."""
        pass

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
