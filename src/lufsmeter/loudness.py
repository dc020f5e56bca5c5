"""Integrated loudness (LUFS) and loudness-matching gain.

The integrated loudness is measured in two passes over the K-weighted
signal. The first pass discards windows below the absolute gate; the second
discards windows more than ``RELATIVE_GATE_LU`` below the first result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

import numpy as np

from .biquad import SampleSource
from .gating import (
    averaged_power,
    gate_mean_squares,
    gated_loudness,
    window_mean_squares,
)
from .prefilter import prefilter

logger = logging.getLogger(__name__)

ABSOLUTE_GATE_LUFS = -70.0
RELATIVE_GATE_LU = -10.0


@dataclass(frozen=True, slots=True)
class LoudnessMeasurement:
    """Integrated loudness together with the gating intermediates."""

    integrated_lufs: float
    absolute_gated_lufs: float
    relative_threshold_lufs: float
    window_count: int
    gated_window_count: int
    sample_count: int

    @property
    def is_silent(self) -> bool:
        return self.integrated_lufs == float("-inf")

    def as_dict(self) -> dict[str, float | int | None]:
        """Field mapping with non-finite levels replaced by ``None`` for strict JSON."""

        payload = asdict(self)
        for key, value in payload.items():
            if isinstance(value, float) and not math.isfinite(value):
                payload[key] = None
        return payload


def loudness(signal: SampleSource) -> float:
    """Return the perceptual loudness, in LUFS, of a mono 48 kHz signal.

    Samples are expected in ``[-1.0, 1.0]``. Returns ``-inf`` when the signal
    is silent or shorter than one 400 ms window.
    """

    filtered = prefilter(signal)
    absolute_gated = gated_loudness(filtered, ABSOLUTE_GATE_LUFS)
    # -inf cascades into the second pass and admits every window.
    integrated = gated_loudness(filtered, absolute_gated + RELATIVE_GATE_LU)
    logger.debug(
        "Measured loudness: absolute_gated=%.4f integrated=%.4f samples=%d",
        absolute_gated,
        integrated,
        filtered.size,
    )
    return integrated


def measure_loudness(signal: SampleSource) -> LoudnessMeasurement:
    """Measure loudness and report how many windows survived each gate.

    Window mean squares are computed once and gated twice, so the result
    matches :func:`loudness`.
    """

    filtered = prefilter(signal)
    mean_squares = window_mean_squares(filtered)

    absolute_gated = averaged_power(*gate_mean_squares(mean_squares, ABSOLUTE_GATE_LUFS))
    relative_threshold = absolute_gated + RELATIVE_GATE_LU
    total, count = gate_mean_squares(mean_squares, relative_threshold)

    return LoudnessMeasurement(
        integrated_lufs=averaged_power(total, count),
        absolute_gated_lufs=absolute_gated,
        relative_threshold_lufs=relative_threshold,
        window_count=int(mean_squares.size),
        gated_window_count=count,
        sample_count=int(filtered.size),
    )


def gain_db(current_lufs: float, target_lufs: float, max_gain_db: float | None = None) -> float:
    """Gain in dB that moves ``current_lufs`` to ``target_lufs``, optionally clamped."""

    delta = target_lufs - current_lufs
    if max_gain_db is not None:
        delta = float(np.clip(delta, -max_gain_db, max_gain_db))
    return delta


def multiplier(current_lufs: float, target_lufs: float) -> float:
    """Linear factor that takes a signal at ``current_lufs`` to ``target_lufs``."""

    # Scaling by x adds 20 * log10(x) to the loudness.
    return 10.0 ** ((target_lufs - current_lufs) / 20.0)
