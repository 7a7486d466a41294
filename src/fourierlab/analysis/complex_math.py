"""Minimal complex-number value type used by the FFT engine."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexNumber:
    """
    Immutable complex value with double-precision components.

    NaN and infinity propagate through every operation per IEEE-754; nothing
    here sanitizes them.
    """

    re: float
    im: float = 0.0

    @classmethod
    def rotor(cls, theta: float) -> "ComplexNumber":
        """Return the unit-magnitude rotor ``e^{i*theta}``."""
        return cls(math.cos(theta), math.sin(theta))

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexNumber":
        value = complex(value)
        return cls(value.real, value.imag)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.re + other.re, self.im + other.im)

    def __sub__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.re - other.re, self.im - other.im)

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def rotate(self, theta: float) -> "ComplexNumber":
        """Multiply by ``e^{i*theta}``."""
        return self * ComplexNumber.rotor(theta)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)


def add(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a + b


def sub(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a - b


def mul(a: ComplexNumber, b: ComplexNumber) -> ComplexNumber:
    return a * b
