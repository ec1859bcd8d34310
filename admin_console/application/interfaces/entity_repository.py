"""Abstract repository interface (port) for console entity persistence."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

E = TypeVar("E")


class EntityRepository(ABC, Generic[E]):
    """Port for one resource collection — implemented in the infrastructure layer.

    Implementations hold no mutable state and may be shared across
    controllers and concurrent calls.
    """

    @abstractmethod
    async def list_all(self) -> list[E]:
        """Fetch the whole collection, already normalized."""
        ...

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> E:
        """Fetch a single entity by id."""
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Create an entity (its id is ignored) and return the server's record."""
        ...

    @abstractmethod
    async def update(self, entity: E) -> E:
        """Update the entity identified by ``entity.id`` and return the server's record."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete an entity. Raises on any failure."""
        ...
