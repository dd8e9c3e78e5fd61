from __future__ import annotations

"""Modelo de una solicitud de empleo recibida por `/api/apply`."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Application(BaseModel):
    """
    Solicitud efímera: sólo vive durante la petición, no se guarda.

    Todos los campos son opcionales a nivel de esquema; la validación de
    campos obligatorios la hace `ApplicationService` para poder devolver el
    mensaje de error acordado en lugar de un error de esquema.
    """

    # Estricto: un booleano no se convierte en 1, se rechaza
    job_id: StrictInt | StrictStr | None = Field(default=None, alias="jobId")
    name: str | None = None
    email: str | None = None  # Sin validación de formato

    model_config = ConfigDict(populate_by_name=True)

    def to_public(self) -> dict:
        """Devuelve los tres campos con los nombres del JSON de entrada."""
        return self.model_dump(by_alias=True)
