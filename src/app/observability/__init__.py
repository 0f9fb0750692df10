"""Observabilidade — logs estruturados e métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_interaction, record_latency
"""

from app.observability.correlation import (
    bind_interaction_id,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_interaction, record_latency

__all__ = [
    "bind_interaction_id",
    "generate_correlation_id",
    "get_correlation_id",
    "record_interaction",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]
