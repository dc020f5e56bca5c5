from __future__ import annotations

from pathlib import Path

import json

from pydantic import BaseModel, Field, field_validator


class NormalizationConfig(BaseModel):
    target_lufs: float = Field(-23.0)
    max_gain_db: float = Field(20.0, ge=0.0, le=60.0)

    @field_validator("target_lufs")
    @classmethod
    def _validate_target_lufs(cls, value: float) -> float:
        if value > 0.0:
            raise ValueError("target_lufs must be <= 0.0.")
        return value


def load_normalization_config(path: Path) -> NormalizationConfig:
    data = _load_config_data(path)
    return NormalizationConfig.model_validate(data)


def _load_config_data(path: Path) -> dict:
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError("PyYAML is required to load YAML configs.") from exc

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
