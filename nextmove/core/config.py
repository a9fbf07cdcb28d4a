from __future__ import annotations

from typing import List, Union
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices
import json


def _parse_cors(value: Union[str, List[str], None]) -> List[str]:
    default = ["http://localhost:5173", "http://127.0.0.1:5173"]
    if value is None:
        return default
    if isinstance(value, list):
        return value or default
    v = value.strip()
    if not v:
        return default
    if v.startswith("["):
        try:
            arr = json.loads(v)
            return list(arr) if isinstance(arr, list) else default
        except ValueError:
            return default
    return [x.strip() for x in v.split(",") if x.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # DB
    SQL_URL: str = "sqlite:///./nextmove.db"

    # Auth (tokens are issued by the identity provider, we only verify them)
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # Cache
    REDIS_URL: str | None = None

    # Branding
    BRANDING_SETTINGS_KEY: str = "branding"
    BRANDING_CACHE_TTL: int = 300
    BRANDING_MAX_ATTEMPTS: int = 3
    BRANDING_RETRY_BASE_DELAY: float = 1.0

    # Public surface / PWA manifest
    PUBLIC_BASE_URL: str = "http://localhost:8000"
    BASE_MANIFEST_URL: str = "/manifest.json"
    BASE_MANIFEST_PATH: str | None = None
    MANIFEST_FETCH_TIMEOUT: float = 10.0

    # Uploads
    BRANDING_UPLOAD_DIR: str = Field(
        default="/tmp/nextmove_uploads",
        validation_alias=AliasChoices("BRANDING_UPLOAD_DIR", "branding_upload_dir", "UPLOAD_DIR"),
    )

    # CORS
    CORS_ORIGINS: Union[str, List[str], None] = None

    # Telemetry
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None

    # Misc
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    def model_post_init(self, *_):
        self.CORS_ORIGINS = _parse_cors(self.CORS_ORIGINS)


settings = Settings()
