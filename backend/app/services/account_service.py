"""Registro de cuentas en memoria (módulo de juguete, sin relación con las ofertas).

Guarda las cuentas en una lista ordenada por registro. Todas las lecturas y
escrituras pasan por el mismo `Lock`, de modo que dos registros simultáneos
con el mismo username no pueden colarse los dos.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import List, Optional

from app.core.errors import DuplicateError, InvalidCredentialsError, ValidationError
from app.models.account import Account, AccountPublic, LoginResult
from app.services.token_issuer import PlaceholderTokenIssuer, TokenIssuer


class AccountService:
    def __init__(self, token_issuer: Optional[TokenIssuer] = None) -> None:
        self._accounts: List[Account] = []
        self._lock = Lock()
        self.token_issuer: TokenIssuer = token_issuer or PlaceholderTokenIssuer()
        self.logger = logging.getLogger(__name__)

    def register(self, username: Optional[str], password: Optional[str]) -> AccountPublic:
        """Crea una cuenta con el siguiente id secuencial (1, 2, 3, ...)."""
        if not username or not password:
            raise ValidationError("Username and password required")

        with self._lock:
            if any(a.username == username for a in self._accounts):
                raise DuplicateError("User already exists")
            # No hay borrados, así que len + 1 nunca repite un id
            account = Account(
                id=len(self._accounts) + 1, username=username, password=password
            )
            self._accounts.append(account)

        self.logger.info("Registered account %s (id=%d)", account.username, account.id)
        return account.to_public()

    def login(self, username: Optional[str], password: Optional[str]) -> LoginResult:
        with self._lock:
            account = next(
                (
                    a
                    for a in self._accounts
                    if a.username == username and a.password == password
                ),
                None,
            )

        if account is None:
            self.logger.warning("Failed login for username %r", username)
            raise InvalidCredentialsError("Invalid credentials")

        return LoginResult(
            id=account.id,
            username=account.username,
            token=self.token_issuer.issue(account),
        )

    def list_accounts(self) -> List[AccountPublic]:
        """Todas las cuentas en orden de registro, sin contraseñas."""
        with self._lock:
            return [a.to_public() for a in self._accounts]
