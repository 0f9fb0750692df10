"""App — núcleo do serviço: interações, comandos e inicialização.

Subpastas:
- bootstrap/: composition root (logging, settings, chamadas de startup)
- interactions/: decoder, router, encoder e follow-ups
- commands/: definições, handlers e registry de comandos
- infra/: cliente HTTP base
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em log

Padrão: app executa; api adapta; config configura; utils apoia.
"""
