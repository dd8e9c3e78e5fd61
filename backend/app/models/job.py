"""Definición del modelo de datos de una oferta de trabajo.

Las ofertas se cargan una sola vez al crear el `JobService` y no cambian
mientras el proceso está vivo, por eso el modelo es inmutable (`frozen`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Job(BaseModel):
    """Oferta publicada en el tablón."""

    id: int = Field(gt=0)
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str = Field(min_length=1)  # Se compara sin distinguir mayúsculas
    salary: str  # Texto para mostrar, no se interpreta como número
    description: str = ""

    model_config = ConfigDict(frozen=True)

    def is_in(self, city: str) -> bool:
        """True si la oferta está exactamente en `city` (ignorando mayúsculas)."""
        return self.location.lower() == city.lower()
