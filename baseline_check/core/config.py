from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from BASELINE_CHECK_* environment variables.

    Every field has a working default, so an empty environment gives an
    in-memory checker backed by the bundled Baseline dataset.
    """

    model_config = SettingsConfigDict(
        env_prefix="BASELINE_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dataset: blank uses the copy bundled with the package.
    dataset_path: Optional[Path] = None

    # History / bookmarks: blank keeps them in memory only.
    storage_path: Optional[Path] = None
    history_limit: int = Field(default=50, ge=1)

    # Result views
    page_size: int = Field(default=20, ge=1)
    recommendation_limit: int = Field(default=4, ge=1)

    # App
    debug: bool = True

    @field_validator("dataset_path", "storage_path", mode="before")
    @classmethod
    def blank_path_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


def get_settings() -> Settings:
    return Settings()
