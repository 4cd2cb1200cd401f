"""
Configuration Schema
~~~~~~~~~~~~~~~~~~~~

Pydantic models for validating Exporter configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

__all__ = [
    "ExporterConfig",
    "StringConfig",
    "ArrayConfig",
    "ObjectConfig",
]


class StringConfig(BaseModel):
    """Shortened string rendering."""

    max_length: int = Field(default=40, ge=1)


class ArrayConfig(BaseModel):
    """Element budget for shortened recursive export (0 disables it)."""

    shorten_longer_than: int = Field(default=0, ge=0)


class ObjectConfig(BaseModel):
    """Record field extraction and object exporter fallback."""

    default_fallback: bool = True
    ignored_fields: list[str] = Field(default_factory=lambda: ["__weakref__"])
    exception_ignored_fields: list[str] = Field(
        default_factory=lambda: ["__traceback__"]
    )

    @field_validator("ignored_fields", "exception_ignored_fields")
    @classmethod
    def validate_field_names(cls, v: list[str]) -> list[str]:
        """Reject blank field names."""
        for name in v:
            if not name.strip():
                raise ValueError(f"Invalid field name: {name!r}")
        return v


class ExporterConfig(BaseModel):
    """
    Root configuration model for the Exporter.

    Validated on load with clear error messages for invalid values.
    """

    version: str = "1.0"
    strings: StringConfig = Field(default_factory=StringConfig)
    arrays: ArrayConfig = Field(default_factory=ArrayConfig)
    objects: ObjectConfig = Field(default_factory=ObjectConfig)
