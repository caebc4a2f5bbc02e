"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use TERMSLIDES_ prefix (e.g., TERMSLIDES_INDENT=4).

Settings can also be loaded from a .env file in the project root.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_ROOT = Path(__file__).parent.parent


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use TERMSLIDES_ prefix.

    Examples:
        TERMSLIDES_INDENT=4
        TERMSLIDES_AUTOPLAY_SECONDS=5
        TERMSLIDES_THEME_NAME=plain
    """

    model_config = SettingsConfigDict(
        env_prefix="TERMSLIDES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Layout configuration
    indent: int = Field(
        default=3,
        ge=0,
        description="Left margin in columns for page content",
    )

    voffset: int = Field(
        default=5,
        ge=0,
        description="Row at which page content starts",
    )

    status_line: bool = Field(
        default=True,
        description="Draw the '[slide n/N]' status line at the bottom of the screen",
    )

    # Content configuration
    date_format: str = Field(
        default="%b %d %Y",
        description="strftime format used when --date is 'today'",
    )

    huge_font: str = Field(
        default="standard",
        description="Default figlet font for --huge lines",
    )

    # Playback configuration
    autoplay_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Seconds between pages in autoplay mode",
    )

    # Logging configuration
    log_file: Optional[str] = Field(
        default=None,
        description="Write log messages to this file instead of stderr",
    )

    # Theme configuration
    theme_name: str = Field(
        default="default",
        description="Name of the playback theme directory",
    )

    themes_dir: str = Field(
        default=str(PACKAGE_ROOT / "themes"),
        description="Directory containing playback themes",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
