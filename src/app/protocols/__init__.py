"""Protocolos (interfaces) consumidos pela camada app."""

from app.protocols.http_client import ControlApiClientProtocol, FollowupClientProtocol

__all__ = [
    "ControlApiClientProtocol",
    "FollowupClientProtocol",
]
