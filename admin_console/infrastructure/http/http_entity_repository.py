"""Concrete repository implementation backed by the console REST API."""

import logging
from typing import Generic, TypeVar

from admin_console.application.adapters.base import EntityAdapter
from admin_console.application.interfaces import EntityRepository
from admin_console.domain.exceptions import ServerError
from admin_console.infrastructure.http.api_client import ApiClient

logger = logging.getLogger(__name__)

E = TypeVar("E")


class HttpEntityRepository(EntityRepository[E], Generic[E]):
    """Implements the EntityRepository port for one ``/api/{resource}`` collection.

    Stateless apart from its collaborators, so one instance can serve any
    number of controllers and overlapping calls.
    """

    def __init__(self, api_client: ApiClient, adapter: EntityAdapter):
        self._api = api_client
        self._adapter = adapter

    def _item_path(self, entity_id: str) -> str:
        return f"{self._adapter.resource}/{entity_id}"

    async def list_all(self) -> list[E]:
        rows = await self._api.get_list(self._adapter.resource)
        entities: list[E] = []
        for row in rows:
            if not isinstance(row, dict):
                logger.warning(
                    "Skipping non-object %s row: %r", self._adapter.label, row
                )
                continue
            entities.append(self._adapter.hydrate(row))
        return entities

    async def get_by_id(self, entity_id: str) -> E:
        record = await self._api.get_record(self._item_path(entity_id))
        return self._adapter.hydrate(record)

    async def create(self, entity: E) -> E:
        record = await self._api.post_record(
            self._adapter.resource, self._adapter.to_payload(entity)
        )
        created = self._adapter.hydrate(record)
        if not created.id:
            raise ServerError(502, f"Created {self._adapter.label} has no id")
        return created

    async def update(self, entity: E) -> E:
        record = await self._api.put_record(
            self._item_path(entity.id), self._adapter.to_payload(entity)
        )
        return self._adapter.hydrate(record)

    async def delete(self, entity_id: str) -> None:
        await self._api.delete(self._item_path(entity_id))
