"""App — coração do sistema: casos de uso, domínio e infraestrutura.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- domain/: value objects, entidades, requests e respostas
- use_cases/: casos de uso (checagens de invariantes antes de mutar)
- infra/: repositórios concretos sobre a API Confluence
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via log estruturado

Padrão: app executa; api adapta; utils apoia.
"""
