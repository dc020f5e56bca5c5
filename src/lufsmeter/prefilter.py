"""K-weighting pre-filter for 48 kHz mono signals."""

from __future__ import annotations

import numpy as np

from .biquad import BiQuadStream, SampleSource, ebu_prefilter_stage_1, ebu_prefilter_stage_2


def prefilter(signal: SampleSource) -> np.ndarray:
    """Return the K-weighted copy of ``signal``.

    Perceived loudness depends on pitch; the two cascaded stages weight the
    spectrum accordingly. The output has the same length as the input and is
    materialised because gating reads it twice.
    """

    stage_1 = BiQuadStream(ebu_prefilter_stage_1(), signal)
    stage_2 = BiQuadStream(ebu_prefilter_stage_2(), stage_1)
    return np.fromiter(stage_2, dtype=np.float64)
