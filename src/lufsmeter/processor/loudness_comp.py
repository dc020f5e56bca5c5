from __future__ import annotations

import logging

import numpy as np

from ..audio_contract import ensure_mono, ensure_supported_rate
from ..loudness import gain_db, loudness, multiplier

logger = logging.getLogger(__name__)


class LoudnessCompProcessor:
    """Apply gain to reach a target integrated loudness.

    Input must be mono 48 kHz audio; silent input is returned unchanged
    because no finite gain reaches the target.
    """

    def __init__(self, target_lufs: float, max_gain_db: float = 20.0) -> None:
        self.target_lufs = float(target_lufs)
        self.max_gain_db = float(max_gain_db)

    def process(self, audio: np.ndarray, sample_rate: float) -> np.ndarray:
        ensure_supported_rate(sample_rate)
        mono = ensure_mono(audio)

        current_lufs = loudness(mono)
        if not np.isfinite(current_lufs):
            logger.warning("Signal has no measurable loudness; leaving it unchanged.")
            return audio

        applied_db = gain_db(current_lufs, self.target_lufs, self.max_gain_db)
        logger.info(
            "Applying loudness gain: current=%.2f LUFS target=%.2f LUFS gain=%.2f dB",
            current_lufs,
            self.target_lufs,
            applied_db,
        )
        gain = multiplier(current_lufs, current_lufs + applied_db)
        return (audio * gain).astype(audio.dtype, copy=False)
