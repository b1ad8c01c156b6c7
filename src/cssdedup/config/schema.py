"""Pydantic model for resolved settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from cssdedup.config.defaults import (
    DEFAULT_EXTENSIONS,
    DEFAULT_HASH_FINGERPRINTS,
    DEFAULT_INDENT,
    DEFAULT_LOG_LEVEL,
)


class DedupSettings(BaseModel):
    model_config = {"extra": "ignore"}

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    indent: str = DEFAULT_INDENT
    hash_fingerprints: bool = DEFAULT_HASH_FINGERPRINTS
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: object) -> object:
        """Accept ``css``, ``.CSS`` or a comma-separated string; store ``.css``."""
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, list | tuple):
            return value
        normalized: list[str] = []
        for ext in value:
            ext = str(ext).strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
