"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Cada campo tiene un valor por defecto pensado para desarrollo
local, así que la API arranca sin ningún `.env`.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Job Board API"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Servidor (Cloud Run inyecta PORT)
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS
    allowed_origins: list[str] | str = ["*"]
    allow_credentials: bool = False

    log_level: str = "INFO"

    # Token fijo que devuelve el login mientras no exista un emisor real
    auth_placeholder_token: str = "fake-jwt-token"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Usamos `lru_cache` para que sólo se construya una instancia por proceso.
    También normalizamos la lista de orígenes permitidos para CORS cuando
    llega como cadena separada por comas.
    """

    settings = Settings()
    # Accept comma separated `ALLOWED_ORIGINS` env value as a string
    ao = settings.allowed_origins
    if isinstance(ao, str):
        settings.allowed_origins = [s.strip() for s in ao.split(",") if s.strip()]
    return settings
