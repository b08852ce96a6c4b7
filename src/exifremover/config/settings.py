"""Application settings and configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exifremover import __app_name__, __version__


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="EXIFREMOVER_", env_file=".env")

    # General settings
    app_name: str = __app_name__
    version: str = __version__

    # Folder used instead of the source folder when both paths coincide
    temp_dir_name: str = Field(default="temp", min_length=1)

    # Re-encoding
    jpeg_quality: int = Field(default=95, ge=1, le=100)
    keep_icc_profile: bool = True
    apply_orientation: bool = False

    # Output settings
    show_banner: bool = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
