"""Agregador de settings do citygen.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    # Constants
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "get_base_settings",
    "get_discord_settings",
]
