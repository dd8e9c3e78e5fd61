"""Punto de entrada de la API usando FastAPI.

`create_app` crea la aplicación, configura logging y CORS, construye los
servicios en memoria, registra los manejadores de error y monta los
routers. El módulo expone además `app`, una instancia lista para uvicorn.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import accounts, applications, calculator, jobs
from app.core.config import Settings, get_settings
from app.core.errors import ServiceError
from app.core.logging_config import configure_logging
from app.services.account_service import AccountService
from app.services.application_service import ApplicationService
from app.services.job_service import JobService
from app.services.token_issuer import PlaceholderTokenIssuer

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 en UTC con milisegundos y sufijo `Z`."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"success": False, "message": message}
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Rutas o métodos que no existen se responden igual: 404 Route Not Found
        if exc.status_code in (404, 405):
            return _error(404, "Route Not Found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        in_body = any(err.get("loc", ("",))[0] == "body" for err in exc.errors())
        message = "Invalid request body" if in_body else "Invalid request parameters"
        return _error(400, message)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)

    # CORS configurable via `settings.allowed_origins` (definido en .env)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o) for o in settings.allowed_origins],
        allow_credentials=settings.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Estado propio de esta instancia; los routers lo reciben vía Depends
    app.state.settings = settings
    app.state.job_service = JobService()
    app.state.application_service = ApplicationService()
    app.state.account_service = AccountService(
        token_issuer=PlaceholderTokenIssuer(settings.auth_placeholder_token)
    )

    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "timestamp": utc_timestamp(),
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy", "timestamp": utc_timestamp()}

    app.include_router(jobs.router, prefix="/api")
    app.include_router(applications.router, prefix="/api")
    app.include_router(accounts.router, prefix="/api")
    app.include_router(calculator.router, prefix="/api")

    logger.info("%s ready (%s)", settings.app_name, settings.environment)
    return app


app = create_app()
