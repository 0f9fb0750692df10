"""Rotas do outgoing webhook de interações."""

from __future__ import annotations

from api.routes.interactions.router import create_interactions_router

__all__ = ["create_interactions_router"]
