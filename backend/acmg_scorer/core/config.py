"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Logging Configuration
    log_level: str = "WARNING"
    log_json: bool = False

    class Config:
        # Pydantic-settings will automatically look for a .env file
        # in the directory where the tool is run.
        env_file = ".env"
        env_prefix = "ACMG_"
        case_sensitive = False
        extra = "ignore"


# Create a global settings instance for easy access across the application
settings = Settings()
