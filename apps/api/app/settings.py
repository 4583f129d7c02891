from pathlib import Path

from pydantic_settings import BaseSettings

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True

    # "development" serves from the root; any other value mounts under /ps-labs
    environment: str = "development"

    # CORS - accepts comma-separated origins or "*" for allow-all
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_all: bool = False

    # Lab content
    steps_dir: Path = CONTENT_DIR / "steps"
    labs_file: Path = CONTENT_DIR / "labs.json"

    # Raise on documents with more than one widget placeholder
    strict_placeholders: bool = False

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def base_path(self) -> str:
        """Path prefix the deployed site is served under."""
        return "" if self.environment == "development" else "/ps-labs"


settings = Settings()
