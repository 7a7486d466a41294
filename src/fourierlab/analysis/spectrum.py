"""Map a complex FFT output to a one-sided magnitude spectrum."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
from numpy.typing import ArrayLike


@dataclass(frozen=True)
class SpectrumPoint:
    frequency_hz: float
    magnitude: float


@dataclass(frozen=True)
class Spectrum:
    """
    Display-ready half spectrum.

    ``points`` covers bins ``0 .. N/2 - 1``; ``nyquist_hz`` is always
    ``sampling_rate / 2`` (``0`` for an empty spectrum).
    """

    points: Tuple[SpectrumPoint, ...] = field(default_factory=tuple)
    nyquist_hz: float = 0.0

    def __len__(self) -> int:
        return len(self.points)

    @property
    def frequencies(self) -> np.ndarray:
        return np.array([p.frequency_hz for p in self.points], dtype=float)

    @property
    def magnitudes(self) -> np.ndarray:
        return np.array([p.magnitude for p in self.points], dtype=float)

    def as_pairs(self) -> List[Tuple[float, float]]:
        return [(p.frequency_hz, p.magnitude) for p in self.points]


def display_magnitudes(spectrum: ArrayLike) -> np.ndarray:
    """
    Scaled magnitudes for bins ``0 .. N/2 - 1`` of an ``N``-point spectrum.

    ``|X_i| / N`` is doubled to fold in the negative-frequency mirror, except
    for the DC bin and (for even ``N``) bin ``N/2 - 1``, which stay at 1x.
    """
    X = np.asarray(spectrum, dtype=np.complex128)
    n = X.size
    half = n // 2
    mags = np.abs(X[:half]) / n * 2.0
    if half:
        mags[0] *= 0.5
        if n % 2 == 0:
            mags[half - 1] = np.abs(X[half - 1]) / n
    return mags


def to_spectrum(spectrum: ArrayLike, sampling_rate_hz: float) -> Spectrum:
    """
    Pair each displayed magnitude with its physical frequency.

    Parameters
    ----------
    spectrum:
        Complex FFT output of length ``N``.
    sampling_rate_hz:
        Sampling rate the time-domain signal was taken at. Must be > 0.

    Returns
    -------
    Spectrum
        Points at ``i * sampling_rate_hz / N`` for ``i < N/2`` and the
        Nyquist frequency. Empty input yields no points and ``nyquist_hz=0``.
    """
    X = np.asarray(spectrum, dtype=np.complex128)
    if X.ndim != 1:
        raise ValueError(f"spectrum must be 1-D, got shape {X.shape}")
    n = X.size
    if n == 0:
        return Spectrum()
    if not sampling_rate_hz > 0:
        raise ValueError(f"sampling_rate_hz must be > 0, got {sampling_rate_hz}")

    fs = float(sampling_rate_hz)
    mags = display_magnitudes(X)
    points = tuple(
        SpectrumPoint(frequency_hz=i * fs / n, magnitude=float(m))
        for i, m in enumerate(mags)
    )
    return Spectrum(points=points, nyquist_hz=fs / 2.0)
