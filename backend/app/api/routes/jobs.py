from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_job_service
from app.core.errors import NotFoundError
from app.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", summary="List all jobs")
async def list_jobs(job_service: JobService = Depends(get_job_service)) -> dict:
    jobs = job_service.list_jobs()
    return {
        "success": True,
        "data": [job.model_dump() for job in jobs],
        "count": len(jobs),
    }


# Se declara antes que /{job_id} para que quede claro qué ruta gana;
# al tener dos segmentos tampoco chocarían.
@router.get("/location/{city}", summary="Filter jobs by city")
async def jobs_by_location(
    city: str, job_service: JobService = Depends(get_job_service)
) -> dict:
    jobs = job_service.jobs_by_location(city)
    if not jobs:
        raise NotFoundError("No jobs found in this location")

    return {
        "success": True,
        "data": [job.model_dump() for job in jobs],
        "count": len(jobs),
    }


@router.get("/{job_id}", summary="Get a single job")
async def get_job(
    job_id: str, job_service: JobService = Depends(get_job_service)
) -> dict:
    # El id llega como texto; un id no numérico es simplemente "no encontrado"
    job = job_service.get_job(job_id)
    if not job:
        raise NotFoundError("No job found.")

    return {"success": True, "data": job.model_dump()}
