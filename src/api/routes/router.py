"""Agregador de rotas — health checks e endpoint de interações.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(interactions_path="/interactions"))
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.interactions import create_interactions_router


def create_api_router(interactions_path: str = "/") -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        interactions_path: Path do POST de interações

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(
        create_interactions_router(interactions_path),
        tags=["interactions"],
    )

    return api_router
