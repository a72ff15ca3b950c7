"""Protocolos e contratos do core da aplicação."""

from .auth_state import AuthenticationProtocol, AuthStateStoreProtocol

__all__ = [
    "AuthStateStoreProtocol",
    "AuthenticationProtocol",
]
