"""API — camada de borda: transporte Confluence, validação e superfícies.

Responsabilidades:
- Falar HTTP com o Confluence (retry, timeout, classificação de falhas)
- Validar argumentos brutos das operações
- Expor o gateway via MCP (stdio) e HTTP

Subpastas:
- connectors/: clientes HTTP por geração da API Confluence
- validators/: gate de validação por operação
- tools/: dispatch gateway, catálogo e adapter MCP
- routes/: endpoints HTTP (health, tools)

NÃO PODE conter: regras de negócio (versão, conflitos), que vivem nos use cases.
"""
