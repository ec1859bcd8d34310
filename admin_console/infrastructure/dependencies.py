"""Dependency wiring — connects infrastructure to the application layer."""

from dataclasses import dataclass
from functools import lru_cache

import httpx

from admin_console.application.adapters import (
    CLIENT_ADAPTER,
    ORGANIZATION_ADAPTER,
    TASK_ADAPTER,
    USER_ADAPTER,
    EntityAdapter,
)
from admin_console.application.interfaces import (
    Confirmer,
    Notifier,
    SessionContext,
    Translator,
)
from admin_console.application.services import ResourceListController
from admin_console.config import Settings, get_settings
from admin_console.infrastructure.http import ApiClient, HttpEntityRepository
from admin_console.infrastructure.translation import CatalogTranslator


@lru_cache
def get_translator(locale: str | None = None) -> CatalogTranslator:
    """Cached translator for ``locale`` (defaults to the configured locale)."""
    return CatalogTranslator(locale or get_settings().locale)


def build_api_client(
    session: SessionContext | None = None,
    *,
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ApiClient:
    settings = settings or get_settings()
    return ApiClient(
        settings.api_root,
        session,
        timeout=settings.request_timeout,
        http_client=http_client,
    )


def build_list_controller(
    adapter: EntityAdapter,
    *,
    api_client: ApiClient,
    notifier: Notifier,
    confirmer: Confirmer,
    translator: Translator | None = None,
    settings: Settings | None = None,
) -> ResourceListController:
    """Provides a ResourceListController with its HTTP repository wired up."""
    settings = settings or get_settings()
    return ResourceListController(
        adapter,
        HttpEntityRepository(api_client, adapter),
        notifier=notifier,
        translator=translator or get_translator(settings.locale),
        confirmer=confirmer,
        page_size=settings.page_size,
    )


@dataclass
class ConsoleControllers:
    """One list controller per console page, sharing a single API client."""

    clients: ResourceListController
    organizations: ResourceListController
    tasks: ResourceListController
    users: ResourceListController

    def all(self) -> tuple[ResourceListController, ...]:
        return (self.clients, self.organizations, self.tasks, self.users)

    def dispose(self) -> None:
        for controller in self.all():
            controller.dispose()


def build_console(
    *,
    session: SessionContext,
    notifier: Notifier,
    confirmer: Confirmer,
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    translator: Translator | None = None,
) -> ConsoleControllers:
    settings = settings or get_settings()
    api_client = build_api_client(session, settings=settings, http_client=http_client)

    def build(adapter: EntityAdapter) -> ResourceListController:
        return build_list_controller(
            adapter,
            api_client=api_client,
            notifier=notifier,
            confirmer=confirmer,
            translator=translator,
            settings=settings,
        )

    return ConsoleControllers(
        clients=build(CLIENT_ADAPTER),
        organizations=build(ORGANIZATION_ADAPTER),
        tasks=build(TASK_ADAPTER),
        users=build(USER_ADAPTER),
    )
