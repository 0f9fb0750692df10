"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo coletor de logs.

Métricas suportadas:
- Latência: tempo de processamento por componente/operação
- Interações: contador por tipo e desfecho (ok, not_found, invalid_arguments, ...)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "interactions")
        operation: Nome da operação (ex: "city", "ping")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_interaction(
    interaction_type: str,
    outcome: str,
    command: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra desfecho de uma interação processada.

    Args:
        interaction_type: Nome do tipo (ex: "APPLICATION_COMMAND")
        outcome: Desfecho (ex: "ok", "not_found", "invalid_arguments", "handler_failed")
        command: Nome do comando ou custom_id, quando houver
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_interaction",
        extra={
            "metric_type": "interaction",
            "interaction_type": interaction_type,
            "outcome": outcome,
            "command": command,
            "correlation_id": correlation_id,
        },
    )
