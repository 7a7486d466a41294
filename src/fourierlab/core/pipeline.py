"""End-to-end analysis: samples in, display-ready spectrum out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..analysis.fft import transform
from ..analysis.padding import pad_to_power_of_two
from ..analysis.spectrum import Spectrum, to_spectrum
from ..analysis.synthesis import SignalComponent, amplitude_sum, synthesize, time_axis
from ..config.sampling import SamplingConfig
from ..tools.debug import debug_enabled, time_block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Output of one pipeline run.

    ``time`` and ``samples`` describe the (unpadded) time-domain signal;
    ``padded_length`` is the FFT size actually used.
    """

    time: np.ndarray
    samples: np.ndarray
    spectrum: Spectrum
    padded_length: int

    @property
    def is_empty(self) -> bool:
        return self.samples.size == 0


def _empty_result() -> AnalysisResult:
    empty = np.zeros(0, dtype=float)
    return AnalysisResult(time=empty, samples=empty.copy(), spectrum=Spectrum(), padded_length=0)


def _spectrum_of(samples: np.ndarray, sampling_rate_hz: float) -> Tuple[Spectrum, int]:
    padded = pad_to_power_of_two(samples)
    if len(padded) != len(samples):
        logger.debug("Padded %d samples to %d for the FFT", len(samples), len(padded))
    label = f"fft n={len(padded)} (from {len(samples)})" if debug_enabled() else "fft"
    with time_block(label):
        bins = transform(padded)
    return to_spectrum(bins, sampling_rate_hz), len(padded)


def analyze_components(
    components: Sequence[SignalComponent],
    sampling: SamplingConfig,
) -> AnalysisResult:
    """
    Synthesize ``components`` and compute their spectrum.

    Raises
    ------
    ValueError
        If ``sampling`` has a non-positive rate or a sample count that is not
        a positive power of two.
    """
    sampling.validate()
    t = time_axis(sampling.sampling_rate_hz, sampling.sample_count)
    samples = synthesize(components, sampling.sampling_rate_hz, sampling.sample_count)
    spectrum, padded_length = _spectrum_of(samples, sampling.sampling_rate_hz)
    return AnalysisResult(time=t, samples=samples, spectrum=spectrum, padded_length=padded_length)


def analyze_samples(samples: ArrayLike, sampling_rate_hz: float) -> AnalysisResult:
    """
    Compute the spectrum of an already-cleaned numeric column.

    The time axis is the sample index. Lengths that are not a power of two
    are zero-padded before the transform; an empty column gives an empty
    result instead of an error.
    """
    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        return _empty_result()
    if not sampling_rate_hz > 0:
        raise ValueError(f"sampling_rate_hz must be > 0, got {sampling_rate_hz}")

    spectrum, padded_length = _spectrum_of(arr, sampling_rate_hz)
    index = np.arange(arr.size, dtype=float)
    return AnalysisResult(time=index, samples=arr, spectrum=spectrum, padded_length=padded_length)


def time_domain_limits(components: Sequence[SignalComponent]) -> Tuple[float, float]:
    """Symmetric y-range that fits any sum of ``components``."""
    bound = max(1.0, amplitude_sum(components)) * 1.1
    return -bound, bound


def spectrum_limits(spectrum: Spectrum) -> Tuple[float, float]:
    """y-range for a magnitude plot, never shorter than ``0.11``."""
    peak = float(spectrum.magnitudes.max()) if spectrum.points else 0.0
    return 0.0, max(0.1, peak) * 1.1
