"""Configuration management for Styled Text."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from styled_text.formatting.ir import (
    BracketScope,
    Color,
    FontDescriptor,
    StyleConfiguration,
)


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Colors
    tint_color: str = Field(default="#007AFF", alias="STYLED_TEXT_TINT")
    link_default_color: str = Field(
        default="#0068DA",
        alias="STYLED_TEXT_LINK_COLOR",
    )
    tint_faded_opacity: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        alias="STYLED_TEXT_TINT_OPACITY",
    )

    # Body font
    body_font_family: str = Field(
        default="system-ui",
        alias="STYLED_TEXT_FONT_FAMILY",
    )
    body_font_size: float = Field(
        default=17.0,
        gt=0,
        alias="STYLED_TEXT_FONT_SIZE",
    )

    # Rendering
    corner_radius: float = Field(default=6.0, ge=0, alias="STYLED_TEXT_CORNER_RADIUS")
    bracket_scope: BracketScope = Field(
        default=BracketScope.ALL,
        alias="STYLED_TEXT_BRACKET_SCOPE",
    )
    default_format: str = Field(default="html", alias="STYLED_TEXT_FORMAT")

    @field_validator("tint_color", "link_default_color")
    @classmethod
    def check_hex_color(cls, value: str) -> str:
        Color.from_hex(value)
        return value

    def style_configuration(
        self,
        tint: Optional[str] = None,
        bracket_scope: Optional[BracketScope] = None,
    ) -> StyleConfiguration:
        """Build the StyleConfiguration described by these settings.

        Args:
            tint: Optional hex color overriding the configured tint
            bracket_scope: Optional override of the configured bracket scope
        """
        return StyleConfiguration(
            tint=Color.from_hex(tint or self.tint_color),
            body_font=FontDescriptor(
                family=self.body_font_family,
                size=self.body_font_size,
            ),
            link_default=Color.from_hex(self.link_default_color),
            tint_faded_opacity=self.tint_faded_opacity,
            corner_radius=self.corner_radius,
            bracket_scope=bracket_scope or self.bracket_scope,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
