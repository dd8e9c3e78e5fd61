"""Emisión de tokens de sesión para el login.

`AccountService` sólo conoce el protocolo `TokenIssuer`; hoy la única
implementación devuelve siempre el mismo texto, pero un emisor real (JWT
firmado, sesiones, etc.) puede enchufarse sin tocar a quien lo usa.
"""

from __future__ import annotations

from typing import Protocol

from app.models.account import Account


class TokenIssuer(Protocol):
    def issue(self, account: Account) -> str: ...


class PlaceholderTokenIssuer:
    """Devuelve un token constante: sin firma, sin caducidad, igual para todos."""

    def __init__(self, token: str = "fake-jwt-token") -> None:
        self.token = token

    def issue(self, account: Account) -> str:
        return self.token
