from .config import NormalizationConfig, load_normalization_config

__all__ = [
    "NormalizationConfig",
    "load_normalization_config",
]
