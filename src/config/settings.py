"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ECOMCON_ prefix (e.g., ECOMCON_UNKNOWN_TAG_POLICY=passthrough).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.directives import UnknownTagPolicy


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use ECOMCON_ prefix.

    Examples:
        ECOMCON_UNKNOWN_TAG_POLICY=passthrough
        ECOMCON_MAX_NESTING_DEPTH=8
        ECOMCON_VERBOSITY=2
    """

    model_config = SettingsConfigDict(
        env_prefix="ECOMCON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Transformation configuration
    unknown_tag_policy: UnknownTagPolicy = Field(
        default=UnknownTagPolicy.SUPPRESS,
        description="Handling of directive lines whose tag is not active (suppress | passthrough)",
    )

    max_nesting_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum number of stacked tags unwrapped on a single line (passthrough policy)",
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        ge=0,
        description="Log verbosity used when no caller state is connected to the logger",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
