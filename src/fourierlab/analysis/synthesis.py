"""Composite sinusoid synthesis."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

import numpy as np


@dataclass(frozen=True)
class SignalComponent:
    """
    One sinusoid of a composite signal.

    ``label`` and ``color`` are carried for plotting only; synthesis ignores
    them.
    """

    frequency_hz: float
    amplitude: float = 1.0
    phase_rad: float = 0.0
    label: str = ""
    color: str = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SignalComponent":
        """
        Build a component from a YAML-style mapping.

        Accepted keys: ``frequency_hz`` (or ``frequency``), ``amplitude``,
        ``phase_rad`` (or ``phase``), ``label``, ``color``.
        """
        if not isinstance(mapping, Mapping):
            raise ValueError(
                f"signal component must be a mapping, got {type(mapping).__name__}"
            )
        freq = mapping.get("frequency_hz", mapping.get("frequency"))
        if freq is None:
            raise ValueError("signal component requires a frequency")
        return cls(
            frequency_hz=float(freq),
            amplitude=float(mapping.get("amplitude", 1.0)),
            phase_rad=float(mapping.get("phase_rad", mapping.get("phase", 0.0))),
            label=str(mapping.get("label", "") or ""),
            color=str(mapping.get("color", "") or ""),
        )

    def to_mapping(self) -> dict:
        data = {
            "frequency_hz": float(self.frequency_hz),
            "amplitude": float(self.amplitude),
            "phase_rad": float(self.phase_rad),
        }
        if self.label:
            data["label"] = self.label
        if self.color:
            data["color"] = self.color
        return data


def _check_sampling(sampling_rate_hz: float, sample_count: int) -> None:
    if not sampling_rate_hz > 0:
        raise ValueError(f"sampling_rate_hz must be > 0, got {sampling_rate_hz}")
    if sample_count <= 0:
        raise ValueError(f"sample_count must be > 0, got {sample_count}")


def time_axis(sampling_rate_hz: float, sample_count: int) -> np.ndarray:
    """Return sample times ``t_i = i / sampling_rate_hz`` in seconds."""
    _check_sampling(sampling_rate_hz, sample_count)
    return np.arange(int(sample_count), dtype=float) / float(sampling_rate_hz)


def synthesize(
    components: Iterable[SignalComponent],
    sampling_rate_hz: float,
    sample_count: int,
) -> np.ndarray:
    """
    Sample a sum of sinusoids.

    Parameters
    ----------
    components:
        Sinusoids to add together. An empty collection yields silence.
    sampling_rate_hz:
        Sampling rate in Hz. Must be > 0.
    sample_count:
        Number of samples to produce. Must be > 0.

    Returns
    -------
    np.ndarray
        ``float64`` array where sample ``i`` equals
        ``sum(A_j * sin(2*pi*f_j*t_i + phi_j))`` with ``t_i = i / fs``.
    """
    t = time_axis(sampling_rate_hz, sample_count)
    out = np.zeros_like(t)
    for comp in components:
        out += comp.amplitude * np.sin(2.0 * math.pi * comp.frequency_hz * t + comp.phase_rad)
    return out


def amplitude_sum(components: Sequence[SignalComponent]) -> float:
    """Upper bound on ``|synthesize(...)|`` for the given components."""
    return float(sum(abs(c.amplitude) for c in components))
