"""Router de interações — monta o endpoint no path configurado."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.interactions.webhook import receive_interaction


def create_interactions_router(path: str = "/") -> APIRouter:
    """Cria router com o POST de interações em `path`.

    Args:
        path: Path derivado de INTERACTIONS_ENDPOINT_URL (default "/")
    """
    router = APIRouter()
    router.add_api_route(
        path,
        receive_interaction,
        methods=["POST"],
        response_model=None,
    )
    return router
