from .loudness_comp import LoudnessCompProcessor

__all__ = [
    "LoudnessCompProcessor",
]
