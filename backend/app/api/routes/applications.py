from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_application_service
from app.models.application import Application
from app.services.application_service import ApplicationService

router = APIRouter(tags=["applications"])


@router.post("/apply", summary="Submit an application for a job")
async def apply(
    application: Application | None = None,
    application_service: ApplicationService = Depends(get_application_service),
) -> dict:
    # Sin cuerpo se trata igual que un cuerpo vacío: faltan todos los campos
    accepted = application_service.submit_application(application or Application())
    return {
        "success": True,
        "message": "Application submitted successfully",
        "data": accepted.to_public(),
    }
