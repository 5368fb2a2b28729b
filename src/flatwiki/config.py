"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".")
    templates_dir: Path = Path(__file__).parent / "templates"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    app_title: str = "FlatWiki"

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
