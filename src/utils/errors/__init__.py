"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BootstrapError,
    InfrastructureError,
    UpstreamApiError,
)

__all__ = [
    "BootstrapError",
    "InfrastructureError",
    "UpstreamApiError",
]
