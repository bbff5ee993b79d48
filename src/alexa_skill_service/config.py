"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "alexa-skill-service"

    # CORS
    cors_origins: list[str] = ["*"]

    # Request verification
    application_id: str = ""  # Skill ID from the Alexa developer console
    ignore_application_id: bool = False
    ignore_timestamp: bool = False  # Disables replay protection
    timestamp_tolerance: int = 150  # Seconds

    class Config:
        env_prefix = "ALEXA_SKILL_"
        case_sensitive = False


settings = Settings()
