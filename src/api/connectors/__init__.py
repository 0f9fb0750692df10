"""Connectors — adapters de borda para APIs externas.

Estrutura:
- discord/: verificação Ed25519, cliente da API de controle e erros

Cada plataforma tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
