"""Power-of-two length helpers."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def is_power_of_two(n: int) -> bool:
    """Return True for 1, 2, 4, 8, ... (zero and negatives are not)."""
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= ``n`` (``0`` for ``n <= 0``)."""
    if n <= 0:
        return 0
    return 1 << (n - 1).bit_length()


def pad_to_power_of_two(samples: Sequence[float]) -> Sequence[float]:
    """
    Zero-pad ``samples`` up to the next power-of-two length.

    Parameters
    ----------
    samples:
        1-D sequence of real samples (list, tuple or NumPy array).

    Returns
    -------
    sequence
        ``samples`` itself when it is empty or already a power of two long;
        otherwise a new sequence of the same kind with exact ``0.0`` values
        appended. The original prefix is never modified.
    """
    n = len(samples)
    if n == 0 or is_power_of_two(n):
        return samples

    target = next_power_of_two(n)
    if isinstance(samples, np.ndarray):
        padded = np.zeros(target, dtype=np.result_type(samples.dtype, np.float64))
        padded[:n] = samples
        return padded
    if isinstance(samples, tuple):
        return samples + (0.0,) * (target - n)
    return list(samples) + [0.0] * (target - n)
