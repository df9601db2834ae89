from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: Optional[str] = None

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOSTNAME: str = "localhost"
    DATABASE_PORT: int = 5432
    POSTGRES_DB: str = "airline_ops"

    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    SQL_ECHO: bool = False

    SEED_AIRCRAFT: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOSTNAME}:{self.DATABASE_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
