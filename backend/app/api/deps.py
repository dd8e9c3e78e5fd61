"""Proveedores para `Depends`: sacan los servicios de `app.state`.

`create_app` construye una instancia de cada servicio por aplicación, así
que los routers nunca tocan estado global y cada `TestClient` empieza limpio.
"""

from fastapi import Request

from app.services.account_service import AccountService
from app.services.application_service import ApplicationService
from app.services.job_service import JobService


def get_job_service(request: Request) -> JobService:
    return request.app.state.job_service


def get_application_service(request: Request) -> ApplicationService:
    return request.app.state.application_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service
