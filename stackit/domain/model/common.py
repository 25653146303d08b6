"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; state changes produce a new instance.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy of this entity with the given fields replaced.

        Changes are validated, unlike a bare model_copy(update=...).
        """
        return self.model_validate({**self.model_dump(), **changes})
