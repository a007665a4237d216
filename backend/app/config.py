from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./agile_checkup.db"
    TEST_DATABASE_URL: str = "sqlite+aiosqlite:///./test.db"

    # Comma-separated; "*" keeps the dashboard reachable from any frontend origin
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Merged word clouds with fewer responses than this are reported as "limited"
    WORD_CLOUD_SUFFICIENT_RESPONSES: int = 10

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _fix_database_url(self):
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if self.DATABASE_URL.startswith("postgresql://"):
            self.DATABASE_URL = self.DATABASE_URL.replace(
                "postgresql://", "postgresql+asyncpg://", 1,
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
