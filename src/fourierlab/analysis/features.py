"""Time- and frequency-domain summary numbers for an analysis run."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .spectrum import Spectrum, SpectrumPoint


def _samples_1d(samples: ArrayLike) -> np.ndarray:
    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        raise ValueError("samples must not be empty")
    return arr


def rms(samples: ArrayLike) -> float:
    """Root-mean-square level of the time-domain samples."""
    arr = _samples_1d(samples)
    return float(np.sqrt(np.mean(arr * arr)))


def peak_to_peak(samples: ArrayLike) -> float:
    """Span between the largest and smallest sample."""
    arr = _samples_1d(samples)
    return float(np.ptp(arr))


def signal_energy(samples: ArrayLike) -> float:
    """Sum of squared samples."""
    arr = _samples_1d(samples)
    return float(np.dot(arr, arr))


def spectral_energy(spectrum: Spectrum, n_samples: int) -> float:
    """
    Time-domain energy implied by a one-sided display spectrum.

    Undoes the display scaling (2x for interior bins, 1x for DC and the
    last mapped bin) and folds the mirrored negative frequencies back in, so
    for a real signal with no content in the Nyquist bin ``N/2`` the result
    matches :func:`signal_energy` (Parseval).
    """
    mags = spectrum.magnitudes
    if mags.size == 0:
        return 0.0
    half = mags.size
    # raw |X_i| / N for each mapped bin
    raw = mags / 2.0
    raw[0] = mags[0]
    if n_samples % 2 == 0:
        raw[half - 1] = mags[half - 1]
    mirrored = np.full(half, 2.0)
    mirrored[0] = 1.0
    return float(n_samples * np.sum(mirrored * np.square(raw)))


def peak_point(spectrum: Spectrum) -> Optional[SpectrumPoint]:
    """Return the largest-magnitude point, or None for an empty spectrum."""
    if not spectrum.points:
        return None
    return max(spectrum.points, key=lambda p: p.magnitude)
