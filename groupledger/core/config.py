from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./groupledger.db"
    SQL_ECHO: bool = False

    JWT_SECRET: str = "change-me-in-production-with-a-long-random-secret"
    JWT_ALGO: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    MAX_PARTICIPANTS: int = 3
    LOG_LEVEL: str = "INFO"

settings = Settings()
