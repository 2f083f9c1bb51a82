from __future__ import annotations
import os
from pydantic import BaseModel, ConfigDict, Field

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "ambassador-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "Campus Ambassador")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    database_url: str = os.getenv("DATABASE_URL", "postgresql+asyncpg://postgres:postgres@db:5432/ambassadors_dev")

    # Bearer tokens; the secret is read once per process and never logged
    jwt_secret: str = Field(default=os.getenv("JWT_SECRET", "dev-secret-change-me-dev-secret-change-me"), repr=False)
    jwt_secret_configured: bool = bool(os.getenv("JWT_SECRET"))
    token_ttl_hours: int = int(os.getenv("TOKEN_TTL_HOURS", "8"))

    # Screenshot vault (private bucket, presigned reads only)
    s3_endpoint: str = os.getenv("S3_ENDPOINT", "http://minio:9000")
    s3_access_key: str = os.getenv("S3_ACCESS_KEY", "minioadmin")
    s3_secret_key: str = Field(default=os.getenv("S3_SECRET_KEY", "minioadmin"), repr=False)
    s3_region: str = os.getenv("S3_REGION", "us-east-1")
    s3_bucket_screenshots: str = os.getenv("S3_BUCKET_SCREENSHOTS", "screenshots")
    upload_max_bytes: int = int(os.getenv("UPLOAD_MAX_BYTES", str(10 * 1024 * 1024)))
    upload_url_ttl_minutes: int = int(os.getenv("UPLOAD_URL_TTL_MINUTES", "60"))
    view_url_ttl_minutes: int = int(os.getenv("VIEW_URL_TTL_MINUTES", "30"))

settings = Settings()
