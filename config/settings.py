"""
Application settings loaded from environment variables.
"""

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: SecretStr                  # HMAC secret for auth tokens (required)
    jwt_expiry_seconds: int = 7200         # 2 hours
    jwt_issuer: str = "devbook"
    jwt_algorithm: str = "HS256"

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = ""
    db_user: str = "postgres"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "devbook"
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8080
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _compose_database_url(self) -> "Settings":
        """Build the asyncpg URL from the DB_* parts when DATABASE_URL is unset."""
        if not self.database_url:
            self.database_url = (
                f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return self


config = Settings()
