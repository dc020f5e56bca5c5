"""Second-order IIR sections used by the K-weighting pre-filter.

A :class:`BiQuadStream` pulls one sample at a time from any iterable source
(a list, a numpy array, a generator, or another stream) and yields exactly one
filtered sample per input, so stages chain without intermediate buffers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

SampleSource = Iterable[float]


@dataclass(frozen=True, slots=True)
class BiQuad:
    """Feedback coefficients ``a`` and feed-forward coefficients ``b``."""

    a: tuple[float, float]
    b: tuple[float, float, float]


def ebu_prefilter_stage_1() -> BiQuad:
    """High-shelf stage modelling the acoustic effect of the head."""

    return BiQuad(
        a=(-1.69065929318241, 0.73248077421585),
        b=(1.53512485958697, -2.69169618940638, 1.19839281085285),
    )


def ebu_prefilter_stage_2() -> BiQuad:
    """High-pass (RLB weighting) stage."""

    return BiQuad(
        a=(-1.99004745483398, 0.99007225036621),
        b=(1.0, -2.0, 1.0),
    )


@dataclass(slots=True)
class FilterHistory:
    """Last two inputs and outputs, most recent first."""

    prev_in: list[float] = field(default_factory=lambda: [0.0, 0.0])
    prev_out: list[float] = field(default_factory=lambda: [0.0, 0.0])

    def push(self, sample_in: float, sample_out: float) -> None:
        self.prev_in[1] = self.prev_in[0]
        self.prev_in[0] = sample_in
        self.prev_out[1] = self.prev_out[0]
        self.prev_out[0] = sample_out


class BiQuadStream(Iterator[float]):
    """Lazily apply a :class:`BiQuad` to ``source`` in direct form I."""

    def __init__(self, biquad: BiQuad, source: SampleSource) -> None:
        self.biquad = biquad
        self._source = iter(source)
        self._history = FilterHistory()

    def __iter__(self) -> BiQuadStream:
        return self

    def __next__(self) -> float:
        sample = float(next(self._source))
        a, b = self.biquad.a, self.biquad.b
        history = self._history
        out = (
            b[0] * sample
            + b[1] * history.prev_in[0]
            + b[2] * history.prev_in[1]
            - a[0] * history.prev_out[0]
            - a[1] * history.prev_out[1]
        )
        history.push(sample, out)
        return out
