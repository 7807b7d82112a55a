from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import validator

class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "Tuiter"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "REST backend for Tuiter: users, tuits, reactions, follows, bookmarks and messages"
    API_PREFIX: str = "/api"

    # Session
    SECRET_KEY: str = "your-secret-key-here"
    SESSION_COOKIE_NAME: str = "tuiter_session"
    SESSION_MAX_AGE_SECONDS: int = 14 * 24 * 60 * 60

    # Cookie settings
    # Note: Set to True in production so the session cookie only travels over HTTPS
    COOKIE_SECURE: bool = False
    COOKIE_SAMESITE: str = "lax"

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    # Tuits
    MAX_TUIT_LENGTH: int = 280

    # Database - prefer an explicit DATABASE_URL; fallback to discrete Postgres settings
    DATABASE_URL: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "tuiter"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DATABASE_DIALECT: str = "postgresql+asyncpg"

    # Migrations
    AUTO_MIGRATE_ON_STARTUP: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_CONFIG_FILE: str = "logging.ini"

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()

# Helper to assemble DB URL when not explicitly provided
def get_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    from urllib.parse import quote_plus

    user = quote_plus(settings.POSTGRES_USER or "")
    password = quote_plus(settings.POSTGRES_PASSWORD or "")
    host = settings.POSTGRES_HOST
    port = settings.POSTGRES_PORT
    db = settings.POSTGRES_DB
    dialect = settings.DATABASE_DIALECT
    if password:
        cred = f"{user}:{password}@"
    elif user:
        cred = f"{user}@"
    else:
        cred = ""
    return f"{dialect}://{cred}{host}:{port}/{db}"
