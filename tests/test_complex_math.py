import math

import pytest

from fourierlab.analysis.complex_math import ComplexNumber, add, mul, sub


def test_add_and_sub() -> None:
    a = ComplexNumber(1.0, 2.0)
    b = ComplexNumber(-0.5, 4.0)
    assert add(a, b) == ComplexNumber(0.5, 6.0)
    assert sub(a, b) == ComplexNumber(1.5, -2.0)


def test_mul_matches_builtin_complex() -> None:
    a = ComplexNumber(1.5, -2.0)
    b = ComplexNumber(0.25, 3.0)
    assert complex(mul(a, b)) == complex(a) * complex(b)


def test_rotor_is_unit_magnitude() -> None:
    for theta in (0.0, 0.3, math.pi / 2, -2.0):
        assert ComplexNumber.rotor(theta).magnitude == pytest.approx(1.0)


def test_rotate_by_quarter_turn() -> None:
    rotated = ComplexNumber(1.0, 0.0).rotate(math.pi / 2)
    assert rotated.re == pytest.approx(0.0, abs=1e-15)
    assert rotated.im == pytest.approx(1.0)


def test_value_semantics() -> None:
    assert ComplexNumber(1.0, 1.0) == ComplexNumber.from_complex(1 + 1j)
    with pytest.raises(AttributeError):
        ComplexNumber(1.0).re = 2.0  # type: ignore[misc]


def test_nan_propagates() -> None:
    out = ComplexNumber(math.nan, 0.0) * ComplexNumber(1.0, 1.0)
    assert math.isnan(out.re)
    assert math.isnan(out.im)
