"""Calendar puzzle settings."""

from pathlib import Path

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class PuzzleSettings(BaseSettings):
    """Settings for the calendar puzzle CLI, read from CALPUZ_* variables."""

    render: bool = True
    """Print every solution as a box-drawing grid. Default: True."""

    image_dir: Path | None = None
    """Directory to save a PNG per solution into. If None (default), no images."""

    log_level: str = "WARNING"
    """Root logging level for the CLI. Default: WARNING."""

    model_config = SettingsConfigDict(
        env_prefix="CALPUZ_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = PuzzleSettings()
