"""Complex numbers with elementary, trigonometric and hyperbolic functions."""

from __future__ import annotations

import math


class Complex:
    """An immutable complex number re + im*i."""

    __slots__ = ("_re", "_im")

    def __init__(self, re: float = 0.0, im: float = 0.0):
        self._re = float(re)
        self._im = float(im)

    @staticmethod
    def _coerce(other: object) -> Complex | None:
        if isinstance(other, Complex):
            return other
        if isinstance(other, (int, float)):
            return Complex(other, 0.0)
        return None

    @property
    def real(self) -> float:
        return self._re

    @property
    def imag(self) -> float:
        return self._im

    @classmethod
    def from_polar(cls, modulus: float, phase: float) -> Complex:
        """Build a number from its modulus and phase."""
        return cls(modulus * math.cos(phase), modulus * math.sin(phase))

    def __str__(self) -> str:
        return f"{self._re:.3f} {self._im:.3f}i"

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"

    def phase(self) -> float:
        return math.atan2(self._im, self._re)

    def modulus(self) -> float:
        return math.hypot(self._re, self._im)

    def conjugate(self) -> Complex:
        """The number mirrored in the real axis."""
        return Complex(self._re, -self._im)

    def reciprocal(self) -> Complex:
        f = 1.0 / (self._re * self._re + self._im * self._im)
        return Complex(self._re * f, -self._im * f)

    def __eq__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._re == c._re and self._im == c._im

    def __hash__(self) -> int:
        return hash((self._re, self._im))

    def __neg__(self) -> Complex:
        return Complex(-self._re, -self._im)

    def __add__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self._re + c._re, self._im + c._im)

    def __radd__(self, other: object) -> Complex:
        return self.__add__(other)

    def __sub__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self._re - c._re, self._im - c._im)

    def __rsub__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c - self

    def __mul__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(
            self._re * c._re - self._im * c._im,
            self._re * c._im + self._im * c._re,
        )

    def __rmul__(self, other: object) -> Complex:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        f = 1.0 / (c._re * c._re + c._im * c._im)
        return Complex(
            (self._re * c._re + self._im * c._im) * f,
            (self._im * c._re - self._re * c._im) * f,
        )

    def __rtruediv__(self, other: object) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c / self

    # power functions

    def sqr(self) -> Complex:
        return Complex(self._re * self._re - self._im * self._im, 2 * self._re * self._im)

    def sqrt(self) -> Complex:
        m = self.modulus()
        r = math.sqrt(0.5 * (m + self._re))
        i = math.sqrt(0.5 * (m - self._re))
        if self._im < 0:
            i = -i
        return Complex(r, i)

    def exp(self) -> Complex:
        e = math.exp(self._re)
        return Complex(e * math.cos(self._im), e * math.sin(self._im))

    def log(self) -> Complex:
        p = self.phase()
        if p > math.pi:
            p -= 2 * math.pi
        return Complex(math.log(self.modulus()), p)

    def pow(self, other: Complex | float) -> Complex:
        return (self.log() * other).exp()

    def logn(self, base: Complex | float) -> Complex:
        return self.log() / Complex._coerce(base).log()

    def log10(self) -> Complex:
        return self.logn(10)

    # trigonometric functions

    def sin(self) -> Complex:
        s = math.sin(self._re)
        c = math.sqrt(1.0 - s * s)
        return Complex(s * math.cosh(self._im), c * math.sinh(self._im))

    def cos(self) -> Complex:
        s = math.sin(self._re)
        c = math.sqrt(1.0 - s * s)
        return Complex(c * math.cosh(self._im), -s * math.sinh(self._im))

    def tan(self) -> Complex:
        return self.sin() / self.cos()

    def _inverse_trig(self, cosine: bool) -> Complex:
        c = (Complex(1.0) - self.sqr()).sqrt()
        if cosine:
            c = self + c * Complex(0, -1)
        else:
            c = c + self * Complex(0, -1)
        return c.log() * Complex(0, 1)

    def asin(self) -> Complex:
        return self._inverse_trig(cosine=False)

    def acos(self) -> Complex:
        return self._inverse_trig(cosine=True)

    def atan(self) -> Complex:
        q = Complex(self._re, self._im - 1) / Complex(-self._re, -self._im - 1)
        return (Complex(0, -1) * q.log()) * 0.5

    def csc(self) -> Complex:
        return Complex(1.0) / self.sin()

    def sec(self) -> Complex:
        return Complex(1.0) / self.cos()

    def cot(self) -> Complex:
        return Complex(1.0) / self.tan()

    def acsc(self) -> Complex:
        return (Complex(1.0) / self).asin()

    def asec(self) -> Complex:
        return (Complex(1.0) / self).acos()

    def acot(self) -> Complex:
        return (Complex(1.0) / self).atan()

    # hyperbolic functions

    def sinh(self) -> Complex:
        s = math.sin(self._im)
        c = math.sqrt(1.0 - s * s)
        return Complex(math.sinh(self._re) * c, math.cosh(self._re) * s)

    def cosh(self) -> Complex:
        s = math.sin(self._im)
        c = math.sqrt(1.0 - s * s)
        return Complex(math.cosh(self._re) * c, math.sinh(self._re) * s)

    def tanh(self) -> Complex:
        return self.sinh() / self.cosh()

    def _inverse_hyperbolic(self, cosine: bool) -> Complex:
        c = self.sqr()
        c = c - 1 if cosine else c + 1
        return (self + c.sqrt()).log()

    def asinh(self) -> Complex:
        return self._inverse_hyperbolic(cosine=False)

    def acosh(self) -> Complex:
        return self._inverse_hyperbolic(cosine=True)

    def atanh(self) -> Complex:
        one = Complex(1.0)
        c = (self + one).log()
        c = c - (-(self - one)).log()
        return c * 0.5

    def csch(self) -> Complex:
        return Complex(1.0) / self.sinh()

    def sech(self) -> Complex:
        return Complex(1.0) / self.cosh()

    def coth(self) -> Complex:
        return Complex(1.0) / self.tanh()

    def acsch(self) -> Complex:
        return (Complex(1.0) / self).asinh()

    def asech(self) -> Complex:
        return (Complex(1.0) / self).acosh()

    def acoth(self) -> Complex:
        return (Complex(1.0) / self).atanh()