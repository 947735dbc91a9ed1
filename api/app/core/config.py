from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from pathlib import Path

# Values already in the environment win over api/.env
load_dotenv(Path(__file__).parent.parent.parent / ".env", override=False)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database - PostgreSQL in production, SQLite for local runs
    database_url: str = ""

    # API
    api_v1_prefix: str = "/api/v1"

    # CORS
    cors_origins: list[str] = ["*"]

    # Locale resolution
    default_locale: str = "en"
    locale_header: str = "x-data-locale"

    # Google Cloud Translation API (machine translation provider)
    google_translate_api_key: str = ""
    machine_translation_timeout: float = 10.0

    # DATABASE_URL, GOOGLE_TRANSLATE_API_KEY, ... map onto the lowercase fields
    class Config:
        case_sensitive = False


# Create settings instance
settings = Settings()

# Validate required DATABASE_URL
if not settings.database_url:
    raise ValueError("DATABASE_URL environment variable is required")
