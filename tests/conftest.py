"""Configuração do pytest para o projeto citygen."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cryptography.hazmat.primitives.asymmetric.ed25519 import (  # noqa: E402
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat  # noqa: E402

from config.settings import get_base_settings, get_discord_settings  # noqa: E402

TIMESTAMP = "1700000000"


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Any:
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()


@pytest.fixture
def signing_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


@pytest.fixture
def verify_key(signing_key: Ed25519PrivateKey) -> Ed25519PublicKey:
    return signing_key.public_key()


@pytest.fixture
def public_key_hex(verify_key: Ed25519PublicKey) -> str:
    return verify_key.public_bytes(Encoding.Raw, PublicFormat.Raw).hex()


@pytest.fixture
def sign(signing_key: Ed25519PrivateKey) -> Callable[..., dict[str, str]]:
    """Assina `timestamp + body` e devolve os headers da plataforma."""

    def _sign(body: bytes, timestamp: str = TIMESTAMP) -> dict[str, str]:
        signature = signing_key.sign(timestamp.encode("utf-8") + body)
        return {
            "X-Signature-Ed25519": signature.hex(),
            "X-Signature-Timestamp": timestamp,
        }

    return _sign


@pytest.fixture
def command_payload() -> Callable[..., dict[str, Any]]:
    """Factory de envelope APPLICATION_COMMAND (guild)."""

    def _build(
        name: str = "city",
        options: list[dict[str, Any]] | None = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {"id": "900", "name": name, "type": 1}
        if options is not None:
            data["options"] = options
        payload: dict[str, Any] = {
            "type": 2,
            "id": "1001",
            "application_id": "42",
            "token": "interaction-token",
            "version": 1,
            "guild_id": "77",
            "channel_id": "88",
            "locale": "en-US",
            "member": {"user": {"id": "5", "username": "ana", "global_name": "Ana"}},
            "data": data,
        }
        payload.update(overrides)
        return payload

    return _build


@pytest.fixture
def component_payload() -> Callable[..., dict[str, Any]]:
    """Factory de envelope MESSAGE_COMPONENT (DM)."""

    def _build(custom_id: str = "reroll:city", **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": 3,
            "id": "1002",
            "application_id": "42",
            "token": "interaction-token",
            "user": {"id": "5", "username": "ana"},
            "data": {"custom_id": custom_id, "component_type": 2},
        }
        payload.update(overrides)
        return payload

    return _build
