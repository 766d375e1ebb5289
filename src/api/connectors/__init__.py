"""Connectors — adapters de borda para APIs externas.

Estrutura:
- confluence/: Confluence Cloud REST API (v1 e v2)
"""

__all__: list[str] = []
