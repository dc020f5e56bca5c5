"""Public package exports for lufsmeter with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "BiQuad",
    "BiQuadStream",
    "LoudnessMeasurement",
    "LoudnessCompProcessor",
    "NormalizationConfig",
    "UnsupportedSignalError",
    "measure_loudness",
    "multiplier",
]

_EXPORT_MODULES: dict[str, str] = {
    "BiQuad": "lufsmeter.biquad",
    "BiQuadStream": "lufsmeter.biquad",
    "LoudnessMeasurement": "lufsmeter.loudness",
    "LoudnessCompProcessor": "lufsmeter.processor",
    "NormalizationConfig": "lufsmeter.utils.config",
    "UnsupportedSignalError": "lufsmeter.audio_contract",
    "measure_loudness": "lufsmeter.loudness",
    "multiplier": "lufsmeter.loudness",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'lufsmeter' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
