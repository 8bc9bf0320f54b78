"""Runtime configuration settings for open-current-activity.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables (or a .env file in the working
directory). This provides:
- Type validation
- Environment variable support (OCA_ prefix)
- Default values
- Easy testing via dependency injection
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from open_current_activity.constants import DEFAULT_SOURCE_EXTENSIONS, SKIP_DIRECTORIES


class AdbSettings(BaseSettings):
    """adb process settings.

    Can be overridden via environment variables with OCA_ADB_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="OCA_ADB_")

    kill_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Seconds to wait for adb to exit after terminate before killing it",
    )


class ProjectSettings(BaseSettings):
    """Android SDK and project source lookup settings.

    Can be overridden via environment variables with OCA_ prefix,
    e.g. OCA_SDK_ROOT or OCA_SOURCE_EXTENSIONS='[".kt", ".java"]'.
    """

    model_config = SettingsConfigDict(env_prefix="OCA_")

    sdk_root: str | None = Field(
        default=None,
        description="Android SDK root; takes precedence over ANDROID_HOME",
    )
    source_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SOURCE_EXTENSIONS),
        min_length=1,
        description="Source file extensions tried in order",
    )
    skip_directories: list[str] = Field(
        default_factory=lambda: list(SKIP_DIRECTORIES),
        description="Directory names never searched for sources",
    )

    @field_validator("source_extensions")
    @classmethod
    def _dotted_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

