"""Configuration management for the nameplate OCR extractor.

Loads and validates YAML configuration with sensible defaults for the
target fields, extraction behaviour, and the HTTP service.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from nameplate_ocr.extraction.field_matcher import DEFAULT_STRIP_CHARS
from nameplate_ocr.extraction.fields import (
    DEFAULT_FIELDS,
    FieldSpec,
    validate_field_keys,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("configs/config.yaml")


class ExtractionConfig(BaseModel):
    """Configuration for field extraction."""

    strip_chars: str = DEFAULT_STRIP_CHARS
    keep_inner_hyphens: bool = True
    not_found_label: str = "Not found"


class ApiConfig(BaseModel):
    """Configuration for the HTTP service."""

    host: str = "0.0.0.0"
    port: int = 8000
    max_text_length: int = 100_000


class AppConfig(BaseModel):
    """Top-level application configuration."""

    fields: list[FieldSpec] = Field(default_factory=lambda: list(DEFAULT_FIELDS))
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    log_level: str = "INFO"

    @field_validator("fields")
    @classmethod
    def _unique_keys(cls, value: list[FieldSpec]) -> list[FieldSpec]:
        if not value:
            raise ValueError("at least one field must be configured")
        validate_field_keys(value)
        return value


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.

    Raises:
        pydantic.ValidationError: If the file describes an invalid field list.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
