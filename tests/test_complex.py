import cmath
import math

import pytest

from mcutools.complex import Complex

Z = Complex(0.3, 0.4)
ZC = complex(0.3, 0.4)


def parts(c):
    return (c.real, c.imag)


def approx_of(c, tol=1e-9):
    return pytest.approx((c.real, c.imag), abs=tol)


def test_parts():
    c = Complex(1.5, -2.5)
    assert c.real == 1.5
    assert c.imag == -2.5


def test_str_format():
    assert str(Complex(1, -2)) == "1.000 -2.000i"


def test_modulus_and_phase():
    c = Complex(3, 4)
    assert c.modulus() == 5.0
    assert c.phase() == math.atan2(4, 3)


def test_from_polar_round_trip():
    c = Complex.from_polar(2.0, 0.7)
    assert c.modulus() == pytest.approx(2.0)
    assert c.phase() == pytest.approx(0.7)


def test_conjugate_and_reciprocal():
    assert Z.conjugate() == Complex(0.3, -0.4)
    assert parts(Z * Z.reciprocal()) == approx_of(complex(1, 0))


def test_reciprocal_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(0, 0).reciprocal()


def test_equality():
    assert Complex(1, 2) == Complex(1, 2)
    assert Complex(1, 2) != Complex(1, 3)
    assert Complex(2, 0) == 2


def test_arithmetic_matches_builtin():
    w = Complex(-1.2, 0.7)
    wc = complex(-1.2, 0.7)
    assert parts(Z + w) == approx_of(ZC + wc)
    assert parts(Z - w) == approx_of(ZC - wc)
    assert parts(Z * w) == approx_of(ZC * wc)
    assert parts(Z / w) == approx_of(ZC / wc)
    assert parts(-Z) == approx_of(-ZC)


def test_reflected_arithmetic_with_numbers():
    assert parts(1 + Z) == approx_of(1 + ZC)
    assert parts(1 - Z) == approx_of(1 - ZC)
    assert parts(2 * Z) == approx_of(2 * ZC)
    assert parts(1 / Z) == approx_of(1 / ZC)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1) / Complex(0, 0)


@pytest.mark.parametrize(
    "name, ref",
    [
        ("sqrt", cmath.sqrt),
        ("exp", cmath.exp),
        ("log", cmath.log),
        ("log10", cmath.log10),
        ("sin", cmath.sin),
        ("cos", cmath.cos),
        ("tan", cmath.tan),
        ("sinh", cmath.sinh),
        ("cosh", cmath.cosh),
        ("tanh", cmath.tanh),
        ("asin", cmath.asin),
        ("acos", cmath.acos),
        ("atan", cmath.atan),
        ("asinh", cmath.asinh),
        ("atanh", cmath.atanh),
    ],
)
def test_functions_match_cmath(name, ref):
    assert parts(getattr(Z, name)()) == approx_of(ref(ZC))


def test_sqr_matches_square():
    assert parts(Z.sqr()) == approx_of(ZC * ZC)


def test_sqrt_negative_imaginary():
    c = Complex(-2.0, -1.0)
    assert parts(c.sqrt()) == approx_of(cmath.sqrt(complex(-2.0, -1.0)))


def test_pow_and_logn():
    w = Complex(1.5, -0.5)
    assert parts(Z.pow(w)) == approx_of(ZC ** complex(1.5, -0.5))
    assert parts(Z.logn(2)) == approx_of(cmath.log(ZC) / cmath.log(2))


@pytest.mark.parametrize(
    "forward, inverse",
    [
        ("sin", "asin"),
        ("cos", "acos"),
        ("tan", "atan"),
        ("csc", "acsc"),
        ("sec", "asec"),
        ("cot", "acot"),
        ("sinh", "asinh"),
        ("cosh", "acosh"),
        ("tanh", "atanh"),
        ("csch", "acsch"),
        ("sech", "asech"),
        ("coth", "acoth"),
    ],
)
def test_inverse_round_trip(forward, inverse):
    assert parts(getattr(getattr(Z, inverse)(), forward)()) == approx_of(ZC, tol=1e-8)


@pytest.mark.parametrize(
    "name, base",
    [
        ("csc", "sin"),
        ("sec", "cos"),
        ("cot", "tan"),
        ("csch", "sinh"),
        ("sech", "cosh"),
        ("coth", "tanh"),
    ],
)
def test_reciprocal_functions(name, base):
    assert parts(getattr(Z, name)() * getattr(Z, base)()) == approx_of(complex(1, 0))


def test_log_of_zero_raises():
    with pytest.raises(ValueError):
        Complex(0, 0).log()