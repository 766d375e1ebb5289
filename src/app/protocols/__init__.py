"""Protocolos e contratos do core da aplicação."""

from .confluence_http import ConfluenceTransportProtocol
from .page_repository import PageRepositoryProtocol
from .search_repository import SearchRepositoryProtocol
from .space_repository import SpaceRepositoryProtocol

__all__ = [
    "ConfluenceTransportProtocol",
    "PageRepositoryProtocol",
    "SearchRepositoryProtocol",
    "SpaceRepositoryProtocol",
]
