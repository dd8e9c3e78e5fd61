"""Errores de dominio que los servicios lanzan y la API traduce a HTTP.

Cada clase lleva su código de estado, de modo que el manejador registrado
en `app.main` sólo tiene que construir el sobre `{success, message}`.
"""

from fastapi import status


class ServiceError(Exception):
    """Base de todos los errores controlados de la aplicación."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(ServiceError):
    """Falta un campo obligatorio o un valor no es aceptable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DivisionByZeroError(ValidationError):
    default_message = "Cannot divide by zero"


class NotFoundError(ServiceError):
    """No existe ningún recurso que coincida con la búsqueda."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class DuplicateError(ServiceError):
    """El recurso ya existe (p. ej. un username registrado)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class InvalidCredentialsError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"
