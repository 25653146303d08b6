"""In-memory unit of work for testing."""

from stackit.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Counts commits and rollbacks.

    In-memory repositories write through immediately, so a rollback does
    not undo anything; tests assert on the counters instead.
    """

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
