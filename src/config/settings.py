"""
Render settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDHTML_ prefix (e.g., MDHTML_BASE_URL=https://example.org/).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Render configuration via environment variables.

    Environment variables use MDHTML_ prefix.

    Examples:
        MDHTML_BASE_URL=https://docs.example.org/
        MDHTML_STYLE="color:green;"
        MDHTML_LINE_SEPARATOR="\r\n"
    """

    model_config = SettingsConfigDict(
        env_prefix="MDHTML_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Link configuration
    base_url: str = Field(
        default="",
        description="Prefix applied to link targets that are not absolute URLs",
    )

    # Tag configuration
    style: Optional[str] = Field(
        default=None,
        description="Inline style attribute value applied to every generated tag",
    )

    # Document configuration
    line_separator: str = Field(
        default="\n",
        description="Literal sequence separating input lines; reused to join output",
    )

    @field_validator("style")
    @classmethod
    def style_check(cls, value: Optional[str]) -> Optional[str]:
        """Blank styles collapse to None; quotes would break the attribute."""
        if value is None or not value.strip():
            return None
        if '"' in value:
            raise ValueError("style must not contain a double quote")
        return value

    @field_validator("line_separator")
    @classmethod
    def lineSeparator_check(cls, value: str) -> str:
        if not value:
            raise ValueError("line_separator must not be empty")
        return value

    def styleAttribute_make(self) -> str:
        """
        Build the attribute fragment inserted into every opening tag.

        Returns:
            ' style="..."' when a style is configured, otherwise ""

        Example:
            >>> AppSettings(style="color:green;").styleAttribute_make()
            ' style="color:green;"'
        """
        if self.style is None:
            return ""
        return f' style="{self.style}"'


# Singleton instance - import this in your code
appsettings = AppSettings()
