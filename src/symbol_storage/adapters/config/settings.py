"""Typed view of the ``[storage]`` configuration section."""

from __future__ import annotations

from datetime import timedelta
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_AWS_S3_REGION = "eu-west-1"
DEFAULT_SAFETY_PERIOD_DAYS = 30


class StorageSettings(BaseModel):
    """Validated ``[storage]`` settings with built-in fallbacks.

    Example:
        >>> StorageSettings().aws_s3_region
        'eu-west-1'
        >>> StorageSettings.model_validate({"safety_period_days": "7"}).safety_period.days
        7
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    aws_s3_region: str = DEFAULT_AWS_S3_REGION
    safety_period_days: int = Field(default=DEFAULT_SAFETY_PERIOD_DAYS, ge=0)

    @field_validator("aws_s3_region", mode="before")
    @classmethod
    def _blank_region_uses_default(cls, v: object) -> object:
        """Treat empty strings from env files as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return DEFAULT_AWS_S3_REGION
        return v

    @property
    def safety_period(self) -> timedelta:
        return timedelta(days=self.safety_period_days)


def load_storage_settings(config: Config) -> StorageSettings:
    """Parse the ``[storage]`` section of ``config``.

    Raises:
        pydantic.ValidationError: If a value has the wrong type or range.
    """
    raw: object = config.get("storage", default={})
    return StorageSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "DEFAULT_AWS_S3_REGION",
    "DEFAULT_SAFETY_PERIOD_DAYS",
    "StorageSettings",
    "load_storage_settings",
]
