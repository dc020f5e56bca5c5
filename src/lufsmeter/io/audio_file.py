from __future__ import annotations

from pathlib import Path

import soundfile as sf
import numpy as np

from ..audio_contract import ensure_mono, ensure_supported_rate


def read_audio(path: Path) -> tuple[np.ndarray, int]:
    """Read a mono 48 kHz file as float32 samples."""

    audio, sample_rate = sf.read(path, dtype="float32", always_2d=False)
    ensure_supported_rate(sample_rate)
    return ensure_mono(audio), int(sample_rate)


def write_audio(path: Path, audio: np.ndarray, sample_rate: int) -> None:
    ensure_supported_rate(sample_rate)
    sf.write(path, ensure_mono(audio), samplerate=sample_rate, subtype="FLOAT")
