import numpy as np
import pytest

SAMPLE_RATE = 48_000


@pytest.fixture
def tone_997():
    """One second of a full-scale 997 Hz sine at 48 kHz."""
    n = np.arange(SAMPLE_RATE)
    return np.sin(2 * np.pi * 997.0 * n / SAMPLE_RATE)


@pytest.fixture
def sample_rate():
    return SAMPLE_RATE
