"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    notes_dir: Path = Path("My-Notes")
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    app_title: str = "QuickNotes"
    list_title: str = "List  Pages"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="QUICKNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
