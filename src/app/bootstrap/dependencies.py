"""Factories de dependências — wiring Confluence.

Conecta clientes HTTP (v1/v2) aos repositórios, repositórios aos use
cases e use cases ao DispatchGateway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.confluence import ApiVersion, create_http_client, parse_api_version
from api.tools.catalog import ConfluenceUseCases, build_tool_definitions
from api.tools.registry import DispatchGateway
from app.infra.confluence import (
    ConfluencePageRepository,
    ConfluenceSearchRepository,
    ConfluenceSpaceRepository,
)
from app.use_cases.confluence import (
    CreatePageUseCase,
    CreateSpaceUseCase,
    DeletePageUseCase,
    GetChildPagesUseCase,
    GetPagesBySpaceUseCase,
    GetPageUseCase,
    GetPageVersionUseCase,
    GetSpaceByIdUseCase,
    GetSpaceByKeyUseCase,
    GetSpacesUseCase,
    PageContextBuilder,
    SearchContentUseCase,
    SearchPagesUseCase,
    UpdatePageUseCase,
    UpdateSpaceUseCase,
)

if TYPE_CHECKING:
    import httpx

    from api.connectors.confluence import ConfluenceHttpClient
    from api.connectors.confluence.http_base import SleepFunc
    from app.protocols import (
        PageRepositoryProtocol,
        SearchRepositoryProtocol,
        SpaceRepositoryProtocol,
    )
    from config.settings import ConfluenceSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfluenceClients:
    """Par de clientes: v1 (CQL, escrita de espaços) e v2 (demais)."""

    v1: ConfluenceHttpClient
    v2: ConfluenceHttpClient


def create_confluence_clients(
    settings: ConfluenceSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: SleepFunc | None = None,
) -> ConfluenceClients:
    """Cria os clientes das duas gerações a partir das mesmas settings.

    Raises:
        ConfigurationError: `settings.api_version` fora de v1/v2.
    """
    configured = parse_api_version(settings.api_version)
    clients = ConfluenceClients(
        v1=create_http_client(settings, ApiVersion.V1, transport=transport, sleep=sleep),
        v2=create_http_client(settings, ApiVersion.V2, transport=transport, sleep=sleep),
    )
    logger.info(
        "confluence_clients_created",
        extra={
            "api_version": configured.value,
            "v1_base_url": clients.v1.base_url,
            "v2_base_url": clients.v2.base_url,
        },
    )
    return clients


def create_use_cases(
    pages: PageRepositoryProtocol,
    spaces: SpaceRepositoryProtocol,
    search: SearchRepositoryProtocol,
) -> ConfluenceUseCases:
    context_builder = PageContextBuilder(spaces, pages)
    return ConfluenceUseCases(
        get_spaces=GetSpacesUseCase(spaces),
        get_space_by_key=GetSpaceByKeyUseCase(spaces),
        get_space_by_id=GetSpaceByIdUseCase(spaces),
        create_space=CreateSpaceUseCase(spaces),
        update_space=UpdateSpaceUseCase(spaces),
        get_page=GetPageUseCase(pages, context_builder),
        create_page=CreatePageUseCase(pages, context_builder),
        update_page=UpdatePageUseCase(pages, context_builder),
        delete_page=DeletePageUseCase(pages),
        get_page_version=GetPageVersionUseCase(pages),
        get_pages_by_space=GetPagesBySpaceUseCase(pages),
        get_child_pages=GetChildPagesUseCase(pages),
        search_pages=SearchPagesUseCase(pages),
        search=SearchContentUseCase(search),
    )


def build_gateway(
    settings: ConfluenceSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: SleepFunc | None = None,
) -> DispatchGateway:
    """Monta o gateway completo com as 14 operações registradas."""
    clients = create_confluence_clients(settings, transport=transport, sleep=sleep)
    use_cases = create_use_cases(
        pages=ConfluencePageRepository(clients.v2, search_client=clients.v1),
        spaces=ConfluenceSpaceRepository(clients.v2, legacy_client=clients.v1),
        search=ConfluenceSearchRepository(clients.v1),
    )
    return DispatchGateway(build_tool_definitions(use_cases))
