"""Validators — validação de argumentos antes de qualquer IO.

Estrutura:
- confluence/: gate de validação das operações Confluence

Cada domínio tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
