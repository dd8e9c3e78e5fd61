from __future__ import annotations

import logging

from app.core.errors import ValidationError
from app.models.application import Application

MISSING_FIELDS_MESSAGE = "Missing required fields: jobId, name, email"


class ApplicationService:
    """
    Recibe solicitudes de empleo. No las guarda: valida, deja constancia en
    el log y devuelve lo recibido.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def submit_application(self, application: Application) -> Application:
        # 0, "" y None cuentan como ausentes. No se comprueba que el jobId exista.
        if not application.job_id or not application.name or not application.email:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        self.logger.info(
            "Application received: jobId=%s name=%s email=%s",
            application.job_id,
            application.name,
            application.email,
        )
        return application
