"""Window power measurement and threshold-gated loudness averaging."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from .audio_contract import SAMPLE_RATE_HZ

WINDOW_LENGTH = SAMPLE_RATE_HZ * 4 // 10
HOP_LENGTH = WINDOW_LENGTH // 4

# K-weighting reference offset in dB.
K_WEIGHTING_OFFSET_DB = -0.691


def mean_square(window: np.ndarray) -> float:
    """Average squared amplitude of ``window``."""

    window = np.asarray(window, dtype=np.float64)
    return float(np.dot(window, window) / window.size)


def power_db(mean_sq: float) -> float:
    """Convert a mean-square value to loudness units; silence maps to ``-inf``."""

    with np.errstate(divide="ignore"):
        return float(K_WEIGHTING_OFFSET_DB + 10.0 * np.log10(mean_sq))


def window_offsets(length: int) -> Iterator[int]:
    """Start offsets of every complete window in a buffer of ``length`` samples."""

    return iter(range(0, length - WINDOW_LENGTH + 1, HOP_LENGTH))


def window_mean_squares(filtered: np.ndarray) -> np.ndarray:
    """Mean square of each complete 400 ms window, in order."""

    filtered = np.asarray(filtered, dtype=np.float64)
    return np.array(
        [mean_square(filtered[offset : offset + WINDOW_LENGTH]) for offset in window_offsets(filtered.size)],
        dtype=np.float64,
    )


def gated_loudness(filtered: np.ndarray, threshold: float) -> float:
    """Loudness of the windows whose power reaches ``threshold``.

    Qualifying windows are averaged in the energy domain before conversion
    to loudness units. Returns ``-inf`` when no window qualifies.
    """

    return averaged_power(*gate_mean_squares(window_mean_squares(filtered), threshold))


def averaged_power(total: float, count: int) -> float:
    if count == 0:
        return float("-inf")
    return power_db(total / count)


def gate_mean_squares(mean_squares: np.ndarray, threshold: float) -> tuple[float, int]:
    """Sum and count of the window mean squares that pass ``threshold``."""

    total = 0.0
    count = 0
    for ms in mean_squares:
        if power_db(ms) >= threshold:
            total += float(ms)
            count += 1
    return total, count
