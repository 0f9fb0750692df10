"""Formatter JSON (python-json-logger) com nomes de campo padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter de uma linha JSON por record.

    Exemplo:
        {"asctime": "2026-02-02 10:30:00,123", "level": "INFO",
         "logger": "app.interactions.router", "message": "metric_interaction",
         "correlation_id": "1189309043230539827", "service": "citygen",
         "outcome": "ok", "command": "city"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
    )
