"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from stackit.domain.error import InvalidArgumentError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_id(value: Optional[str], field: str) -> Optional[UUID]:
    """Parse an optional UUID string; empty values count as missing.

    Raises:
        InvalidArgumentError: If the value is not a valid UUID
    """
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise InvalidArgumentError(f"Invalid {field}: {value}")
