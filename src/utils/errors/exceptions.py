"""Exceções de domínio para falhas de infraestrutura e de APIs externas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class UpstreamApiError(InfrastructureError):
    """Chamada à API de controle da plataforma rejeitada ou sem resposta.

    Atributos:
        status_code: Status HTTP retornado (None se não houve resposta)
        error_code: Código de erro da plataforma (campo `code` do JSON)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code


class BootstrapError(InfrastructureError):
    """Falha irrecuperável no bootstrap (registro de comandos/endpoint).

    O serviço não deve aceitar tráfego quando esta exceção ocorre.
    """
