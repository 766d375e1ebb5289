"""Construção de queries CQL (Confluence Query Language)."""

from __future__ import annotations

# orderBy -> cláusula ORDER BY; relevance usa a ordenação padrão do servidor
_ORDER_CLAUSES: dict[str, str] = {
    "created": "created DESC",
    "modified": "lastModified DESC",
    "title": "title ASC",
}


def escape_cql(value: str) -> str:
    """Escapa barra invertida e aspas duplas para uso dentro de "..."."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def order_clause(order_by: str | None) -> str:
    """Cláusula ORDER BY (com espaço inicial) ou string vazia."""
    clause = _ORDER_CLAUSES.get(order_by or "relevance")
    return f" ORDER BY {clause}" if clause else ""


def build_search_cql(
    query: str,
    *,
    space_key: str | None = None,
    content_type: str | None = None,
    include_archived_spaces: bool = True,
    order_by: str | None = None,
) -> str:
    """Monta a query de busca textual.

    Exemplo:
        >>> build_search_cql("deploy", space_key="ENG", order_by="created")
        'text ~ "deploy" AND space.key = "ENG" ORDER BY created DESC'
    """
    cql = f'text ~ "{escape_cql(query)}"'
    if space_key:
        cql += f' AND space.key = "{escape_cql(space_key)}"'
    if content_type:
        cql += f' AND type = "{escape_cql(content_type)}"'
    if not include_archived_spaces:
        cql += " AND space.status = current"
    return cql + order_clause(order_by)


def build_title_lookup_cql(space_id: str, title: str) -> str:
    """Query para achar página por título exato dentro de um espaço."""
    return f'type = page AND space.id = "{escape_cql(space_id)}" AND title = "{escape_cql(title)}"'
