"""
Configuration management for the Job Search Assistant.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Job listing providers (RapidAPI)
    rapidapi_key: str = ""
    rapidapi_jsearch_host: str = ""
    rapidapi_upwork_jobs_p_host: str = ""
    rapidapi_linkedinpost_host: str = ""

    # LLM
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash-latest"

    # Search settings
    search_timeout: float = 30.0

    # Keyword extraction falls back to this when the resume names no location
    default_resume_location: str = "India"

    # Server
    cors_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
