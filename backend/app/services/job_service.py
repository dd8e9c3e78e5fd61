"""Servicio de sólo lectura sobre las ofertas de trabajo.

Las ofertas se reciben en el constructor y se guardan en una tupla, así que
no hace falta ningún bloqueo aunque varias peticiones lean a la vez.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from app.models.job import Job
from app.services.seed_data import DEFAULT_JOBS

# Entero al principio de la cadena: " 2" -> 2, "3abc" -> 3, "abc" -> sin match
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_job_id(raw_id: int | str) -> Optional[int]:
    """Convierte el id de la URL en entero, o None si no empieza por dígitos."""
    if isinstance(raw_id, int):
        return raw_id
    match = _LEADING_INT.match(raw_id)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Más dígitos de los que `int` acepta: ningún id puede coincidir
        return None


class JobService:
    """
    Consulta de ofertas. MVP: datos fijos en memoria.
    Más adelante se puede sustituir por BD persistente.
    """

    def __init__(self, jobs: Iterable[Job] | None = None) -> None:
        self._jobs: tuple[Job, ...] = tuple(DEFAULT_JOBS if jobs is None else jobs)

    def list_jobs(self) -> List[Job]:
        """Todas las ofertas en el orden en que se cargaron."""
        return list(self._jobs)

    def get_job(self, job_id: int | str) -> Optional[Job]:
        """Devuelve la primera oferta con ese id o None si no existe."""
        parsed = parse_job_id(job_id)
        if parsed is None:
            return None
        return next((job for job in self._jobs if job.id == parsed), None)

    def jobs_by_location(self, city: str) -> List[Job]:
        """Ofertas cuya ciudad coincide entera con `city`, sin distinguir mayúsculas."""
        return [job for job in self._jobs if job.is_in(city)]
