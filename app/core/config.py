"""Application configuration for the dual-coding EMR core.

Configuration is loaded from environment variables, making the service suitable
for container-based deployments. The terminology registry is optional: when
either its host or its API key is missing the service runs in pure fallback
mode against the bundled corpus.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "namaste_emr"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    database_url: str | None = None

    terminology_api_host: str | None = None
    terminology_api_key: str | None = None
    terminology_timeout_seconds: float = Field(default=5.0, gt=0)
    terminology_min_query_length: int = Field(default=2, ge=1)
    terminology_api_key_header: str = "x-api-key"
    terminology_bypass_warning_header: str = "ngrok-skip-browser-warning"

    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    @property
    def sqlalchemy_database_uri(self) -> str:
        if self.database_url:
            return self.database_url

        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def terminology_registry_configured(self) -> bool:
        return bool((self.terminology_api_host or "").strip() and (self.terminology_api_key or "").strip())


settings = Settings()
