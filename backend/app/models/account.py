"""Modelos del registro de cuentas en memoria."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Account(BaseModel):
    """Cuenta registrada. La contraseña se guarda tal cual (es un juguete)."""

    id: int = Field(gt=0)
    username: str
    password: str

    def to_public(self) -> "AccountPublic":
        return AccountPublic(id=self.id, username=self.username)


class AccountPublic(BaseModel):
    """Vista de una cuenta sin la contraseña."""

    id: int
    username: str


class LoginResult(AccountPublic):
    token: str


class Credentials(BaseModel):
    """Cuerpo de `/api/register` y `/api/login`."""

    username: str | None = None
    password: str | None = None
