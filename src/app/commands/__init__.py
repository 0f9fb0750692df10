"""Comandos do bot — definições estáticas, handlers e registry."""

from app.commands.definitions import CommandDefinition, CommandParameter, OptionType
from app.commands.registry import (
    CommandRegistry,
    RegisteredCommand,
    build_default_registry,
)

__all__ = [
    "CommandDefinition",
    "CommandParameter",
    "CommandRegistry",
    "OptionType",
    "RegisteredCommand",
    "build_default_registry",
]
