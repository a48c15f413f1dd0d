# src/config/settings.py
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Optional

# Get project root (2 levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    # OpenAI (or any OpenAI-compatible endpoint via openai_base_url)
    openai_api_key: str
    openai_base_url: Optional[str] = None
    openai_llm_model: str = "gpt-5-nano"
    llm_timeout_seconds: float = 30.0

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_database: str = "feedback"
    postgres_username: str = "postgres"
    postgres_password: str = ""
    postgres_sslmode: str = "prefer"

    # Web app
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        case_sensitive = False
