"""Erros do pipeline de interações.

Terminais por request (respondidos com status HTTP de erro):
- MalformedInteractionError

Convertidos em resposta 200 com mensagem efêmera:
- ArgumentValidationError
- CommandNotFoundError
"""

from __future__ import annotations


class InteractionError(Exception):
    """Base para erros do pipeline de interações."""


class MalformedInteractionError(InteractionError):
    """Payload fora do schema documentado da plataforma."""


class ArgumentValidationError(InteractionError):
    """Opções do comando ausentes ou com tipo/valor inválido.

    A mensagem é exibida ao usuário; não deve conter detalhes internos.
    """


class CommandNotFoundError(InteractionError):
    """Comando (ou custom_id) sem handler no registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name
