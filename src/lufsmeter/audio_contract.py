"""Signal contract shared by the meter and its I/O collaborators.

Invariants
----------
* The meter only measures mono float PCM in ``[-1.0, 1.0]`` at
  ``SAMPLE_RATE_HZ``.
* Collaborators reject audio outside the contract; they never resample or
  down-mix.
"""

from __future__ import annotations

import numpy as np

SAMPLE_RATE_HZ = 48_000
CHANNEL_COUNT = 1


class UnsupportedSignalError(ValueError):
    """Raised when audio does not match the mono 48 kHz contract."""


def ensure_supported_rate(sample_rate: float) -> None:
    """Validate that ``sample_rate`` is the fixed metering rate."""

    if int(sample_rate) != SAMPLE_RATE_HZ or sample_rate != int(sample_rate):
        raise UnsupportedSignalError(
            f"Unsupported sample rate {sample_rate} Hz. Only {SAMPLE_RATE_HZ} Hz audio can be measured."
        )


def ensure_mono(audio: np.ndarray) -> np.ndarray:
    """Return ``audio`` as a 1D array.

    2D input is read in the frames-by-channels layout soundfile returns and
    must have exactly one channel column.
    """

    audio = np.asarray(audio)
    if audio.ndim == 2 and audio.shape[1] == CHANNEL_COUNT:
        return audio.reshape(-1)
    if audio.ndim != 1:
        raise UnsupportedSignalError(
            f"Expected mono audio, got array with shape {audio.shape}. Multi-channel audio is not supported."
        )
    return audio
