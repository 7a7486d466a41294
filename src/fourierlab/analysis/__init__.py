"""Fourier analysis core (synthesis, padding, FFT and spectrum mapping).

Modules here are pure functions over NumPy arrays with no I/O or plotting
dependencies, so they can be reused from the pipeline, the CLI plotter, or
tests alike:
- :mod:`synthesis` builds sums of sinusoids.
- :mod:`padding` zero-pads to power-of-two lengths.
- :mod:`fft` is the radix-2 transform.
- :mod:`spectrum` turns bins into (frequency, magnitude) points.
"""

from .complex_math import ComplexNumber
from .fft import bit_reverse_permutation, transform
from .padding import is_power_of_two, pad_to_power_of_two
from .spectrum import Spectrum, SpectrumPoint, to_spectrum
from .synthesis import SignalComponent, synthesize, time_axis

__all__ = [
    "ComplexNumber",
    "Spectrum",
    "SpectrumPoint",
    "SignalComponent",
    "bit_reverse_permutation",
    "is_power_of_two",
    "pad_to_power_of_two",
    "synthesize",
    "time_axis",
    "to_spectrum",
    "transform",
]
