"""
Library configuration using pydantic-settings.

Settings are read from ``TEXTCOMPARE_*`` environment variables (or a ``.env``
file) and can be overridden at runtime with :func:`configure`.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textcompare.exceptions import ConfigurationError
from textcompare.models.graphemes import Graphemes


class TextCompareSettings(BaseSettings):
    """Default parameters for distance, alignment and segmentation calls."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTCOMPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Cost of substituting one element with a different one
    substitution_cost: int = Field(default=1, ge=0)

    # Element written on the side that consumed nothing in an alignment
    placeholder: str = " "

    # Element separating words for segmentation and word-level metrics
    word_delimiter: str = " "

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("placeholder", "word_delimiter")
    @classmethod
    def _single_grapheme(cls, value: str) -> str:
        if len(Graphemes(value)) != 1:
            raise ValueError("must be exactly one grapheme")
        return value


# Runtime overrides applied on top of the environment
_overrides: dict[str, Any] = {}


@lru_cache
def get_settings() -> TextCompareSettings:
    """
    Get the active settings instance.

    Returns:
        Cached TextCompareSettings built from the environment and any overrides
    """
    return _build_settings(**_overrides)


def configure(**overrides) -> TextCompareSettings:
    """
    Replace the active settings.

    Args:
        **overrides: Field values to set (e.g. ``substitution_cost=2``)

    Returns:
        The new active settings

    Raises:
        ConfigurationError: If a value fails validation; the previous
            settings stay active
    """
    _build_settings(**overrides)
    _overrides.clear()
    _overrides.update(overrides)
    get_settings.cache_clear()
    return get_settings()


def reset_settings() -> None:
    """Drop runtime overrides; the next get_settings() call re-reads the environment."""
    _overrides.clear()
    get_settings.cache_clear()


def _build_settings(**overrides) -> TextCompareSettings:
    try:
        return TextCompareSettings(**overrides)
    except ValidationError as e:
        errors = e.errors()
        setting_name = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise ConfigurationError(f"Invalid textcompare settings: {e}", setting_name=setting_name)
