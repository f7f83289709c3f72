import os
from dotenv import load_dotenv
from urllib.parse import quote_plus

load_dotenv()

class Settings:
    # Environment setting
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    # Explicit connection string wins over the DB_* parts below
    DATABASE_URL_OVERRIDE = os.getenv("DATABASE_URL")

    # db creds
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "drivesafe")
    DB_PORT = os.getenv("DB_PORT", "5432")

    # User id used when a request carries neither an authenticated user nor ?userId=
    DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "1")

    LOG_DIR = os.getenv("LOG_DIR", "logs")

    CORS_ORIGINS = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]

    def _build_database_url(self):
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+asyncpg://{self.DB_USER}:{quote_plus(self.DB_PASSWORD)}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def DATABASE_URL(self):
        return self._build_database_url()

    @property
    def IS_DEVELOPMENT(self):
        return self.ENVIRONMENT == "development"

settings = Settings()
