"""
Application configuration module.

Defines and initializes environment-specific settings using Pydantic BaseSettings.
Loads environment variables from a `.env` file.
"""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Centralized application configuration using environment variables.

    Attributes:
        env (str): Current environment name (e.g., 'development', 'production').
        log_level (str): Logging level (e.g., 'DEBUG', 'INFO').
        components_dir (Path): Root directory scanned for component handlers.
        component_extensions (list[str]): File extensions treated as handler modules.
    """

    env: str = "development"

    log_level: str = "INFO"

    components_dir: Path = Path("components")
    component_extensions: list[str] = [".py"]

    class Config:
        """Loads environment variables from `.env` file using UTF-8 encoding."""

        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"


settings = Settings()
