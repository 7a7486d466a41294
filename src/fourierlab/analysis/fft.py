"""Radix-2 FFT (iterative Cooley-Tukey, decimation in time)."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from .complex_math import ComplexNumber
from .padding import is_power_of_two


def bit_reverse_permutation(buf: np.ndarray) -> np.ndarray:
    """
    Reorder ``buf`` in place so index ``i`` moves to ``reverse_bits(i)``.

    ``len(buf)`` must be a power of two. Returns ``buf`` for chaining.
    """
    n = len(buf)
    j = 0
    for i in range(1, n):
        # j is i-1 bit-reversed; add one from the top bit down
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            buf[i], buf[j] = buf[j], buf[i]
    return buf


def transform(samples: ArrayLike) -> np.ndarray:
    """
    Compute the discrete Fourier transform of a real 1-D signal.

    Parameters
    ----------
    samples:
        Real-valued samples. The length must be a power of two; pad with
        :func:`fourierlab.analysis.padding.pad_to_power_of_two` first.

    Returns
    -------
    np.ndarray
        ``complex128`` spectrum of the same length, in natural bin order.
        An empty input returns an empty array.

    Raises
    ------
    ValueError
        If the input is not 1-D or its length is not a power of two.

    Notes
    -----
    Each stage advances its twiddle factor by repeated multiplication with the
    stage rotor ``e^{-2*pi*i/len}`` instead of evaluating ``cos``/``sin`` per
    bin. This accumulates a little rounding drift for large ``N``. The
    butterflies for one twiddle are applied to every block of the stage at
    once through strided views of the working buffer.
    """
    arr = np.asarray(samples, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {arr.shape}")

    n = arr.size
    if n == 0:
        return np.zeros(0, dtype=np.complex128)
    if not is_power_of_two(n):
        raise ValueError(
            f"FFT length must be a power of two, got {n}; "
            "pad the signal with pad_to_power_of_two() first"
        )

    # Fresh buffer per call; never aliases the caller's array.
    buf = arr.astype(np.complex128)
    bit_reverse_permutation(buf)

    size = 2
    while size <= n:
        half = size >> 1
        step = ComplexNumber.rotor(-2.0 * math.pi / size)
        w = ComplexNumber(1.0, 0.0)
        for k in range(half):
            upper = buf[k::size].copy()
            lower = buf[k + half::size] * complex(w)
            buf[k::size] = upper + lower
            buf[k + half::size] = upper - lower
            w = w * step
        size <<= 1

    return buf
