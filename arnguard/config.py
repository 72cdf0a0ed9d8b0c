"""Configuration loading and validation for arnguard."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .conditions import COMMON_KEYS, StaticKeyRegistry
from .exceptions import BadConfig


class LoggingSettings(BaseModel):
    level: str = "INFO"
    output: Literal["stderr", "file"] = "stderr"
    file_path: str = "arnguard.log"
    rotate_bytes: int = 10_485_760

    @field_validator("rotate_bytes")
    @classmethod
    def validate_rotate_bytes(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("rotate_bytes must be positive")
        return value


class ConditionSettings(BaseModel):
    enabled: bool = True
    extra_keys: list[str] = Field(default_factory=list)

    @field_validator("extra_keys")
    @classmethod
    def validate_keys(cls, value: list[str]) -> list[str]:
        for name in value:
            namespace, _, key = name.partition(":")
            if not namespace or not key:
                raise ValueError(f"condition key {name!r} must look like 'namespace:name'")
        return value


class Settings(BaseModel):
    version: int = 1
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    conditions: ConditionSettings = Field(default_factory=ConditionSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise BadConfig(message=str(exc)) from exc

    def registry(self) -> StaticKeyRegistry:
        """Condition keys eligible for substitution under these settings."""

        if not self.conditions.enabled:
            return StaticKeyRegistry([])
        return COMMON_KEYS.extend(self.conditions.extra_keys)


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise BadConfig(message=f"Failed to read config: {exc}") from exc
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise BadConfig(message=f"Failed to parse config YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise BadConfig(message="Config root must be a mapping")
    return Settings.from_dict(data)
