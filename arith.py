"""
Arithmetic Engine

Operator set over the ExactNumber tower (Z < Q < Q[i]).

Rational operands are handled with exact cross-multiplication. Gaussian
rationals are split into real and imaginary rationals, combined with the usual
complex identities and renormalised. Transcendental functions of rationals go
through the float functions of `math` and come back via the exact float
conversion, so their results are approximations written exactly.

All functions take tower values only; anything else raises DomainError.
"""
from __future__ import annotations
import builtins
import math
from typing import Callable, Optional, Tuple

from exact import Domain, DomainError, ExactNumber, new
import newton

ZERO = ExactNumber(0)
ONE = ExactNumber(1)
TWO = ExactNumber(2)
NEG_ONE = ExactNumber(-1)
HALF = ExactNumber(1, 2)
THIRD = ExactNumber(1, 3)
I = ExactNumber(0, 1, 1, 1)
INF = ExactNumber(1, 0)
NEG_INF = ExactNumber(-1, 0)
NAN = ExactNumber(0, 0)

E = new(math.e)
LN2 = new(math.log(2))
LN10 = new(math.log(10))
LOG2E = new(math.log2(math.e))
LOG10E = new(math.log10(math.e))
PI = new(math.pi)
SQRT1_2 = new(math.sqrt(0.5))
SQRT2 = new(math.sqrt(2))


def _require(*values: object) -> None:
    for value in values:
        if not isinstance(value, ExactNumber):
            raise DomainError(
                f"expected ExactNumber operand, got {type(value).__name__}"
            )


def _is_real(x: ExactNumber) -> bool:
    return x.domain is not Domain.GAUSSIAN


def _join(re: ExactNumber, im: ExactNumber) -> ExactNumber:
    """Build re + im*i from two rationals."""
    return ExactNumber(re.re_num, re.re_den, im.re_num, im.re_den)


def _via_float(fn: Callable[..., float], *args: ExactNumber) -> ExactNumber:
    return new(fn(*(float(a) for a in args)))


def _within(x: ExactNumber, lo: ExactNumber, hi: ExactNumber) -> bool:
    return _is_real(x) and le(lo, x) and le(x, hi)


# ======== rounding and characteristics ========


def trunc(x: ExactNumber) -> ExactNumber:
    _require(x)
    if x.domain is Domain.INTEGER:
        return x
    if x.domain is Domain.RATIONAL:
        if x.re_den == 0:
            return x
        q = builtins.abs(x.re_num) // x.re_den
        return ExactNumber(q if x.re_num >= 0 else -q)
    return _join(trunc(x.real), trunc(x.imag))


def floor(x: ExactNumber) -> ExactNumber:
    _require(x)
    if x.domain is Domain.INTEGER:
        return x
    if x.domain is Domain.RATIONAL:
        if x.re_den == 0:
            return x
        return ExactNumber(x.re_num // x.re_den)
    return _join(floor(x.real), floor(x.imag))


def ceil(x: ExactNumber) -> ExactNumber:
    _require(x)
    if x.domain is Domain.INTEGER:
        return x
    if x.domain is Domain.RATIONAL:
        if x.re_den == 0:
            return x
        return ExactNumber(-(-x.re_num // x.re_den))
    return _join(ceil(x.real), ceil(x.imag))


def round(x: ExactNumber) -> ExactNumber:
    """Round half away from zero, per part for Gaussian values."""
    _require(x)
    if x.domain is Domain.INTEGER:
        return x
    if x.domain is Domain.RATIONAL:
        if x.re_num >= 0:
            return floor(add(x, HALF))
        return ceil(sub(x, HALF))
    return _join(round(x.real), round(x.imag))


def abs(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return ExactNumber(builtins.abs(x.re_num), x.re_den)
    return hypot(x.real, x.imag)


def sign(x: ExactNumber) -> ExactNumber:
    _require(x)
    return ExactNumber(
        (x.re_num > 0) - (x.re_num < 0), 1, (x.im_num > 0) - (x.im_num < 0), 1
    )


def neg(x: ExactNumber) -> ExactNumber:
    _require(x)
    return ExactNumber(-x.re_num, x.re_den, -x.im_num, x.im_den)


def conjugate(x: ExactNumber) -> ExactNumber:
    _require(x)
    return x.conjugate()


# ======== four operations and modulo ========


def add(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    _require(x, y)
    if _is_real(x) and _is_real(y):
        if x.re_den == 0 and y.re_den == 0:
            return new(float(x) + float(y))
        return ExactNumber(x.re_num * y.re_den + y.re_num * x.re_den, x.re_den * y.re_den)
    # (a+bi)+(c+di) = (a+c)+(b+d)i
    return _join(add(x.real, y.real), add(x.imag, y.imag))


def sub(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    _require(x, y)
    if _is_real(x) and _is_real(y):
        if x.re_den == 0 and y.re_den == 0:
            return new(float(x) - float(y))
        return ExactNumber(x.re_num * y.re_den - y.re_num * x.re_den, x.re_den * y.re_den)
    return _join(sub(x.real, y.real), sub(x.imag, y.imag))


def mul(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    _require(x, y)
    if _is_real(x) and _is_real(y):
        return ExactNumber(x.re_num * y.re_num, x.re_den * y.re_den)
    a, b, c, d = x.real, x.imag, y.real, y.imag
    # (a+bi)(c+di) = (ac-bd)+(ad+bc)i
    return _join(sub(mul(a, c), mul(b, d)), add(mul(a, d), mul(b, c)))


def div(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    _require(x, y)
    if _is_real(x) and _is_real(y):
        return ExactNumber(x.re_num * y.re_den, x.re_den * y.re_num)
    a, b, c, d = x.real, x.imag, y.real, y.imag
    # (a+bi)/(c+di) = ((ac+bd) + (bc-ad)i) / (c^2+d^2)
    denominator = add(mul(c, c), mul(d, d))
    return _join(
        div(add(mul(a, c), mul(b, d)), denominator),
        div(sub(mul(b, c), mul(a, d)), denominator),
    )


def mod(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    """Remainder of x by y.

    Non-negative rationals: x - y*trunc(x/y). Negative rationals keep the sign of
    x: sign(x) * (|x| mod |y|). Gaussian values use
    x mod y = (y/2πi) log(exp((2π/y) i x)), which is a principal-value
    approximation and can disagree with the rational branch at boundaries.
    """
    _require(x, y)
    if _is_real(x) and _is_real(y):
        if x.re_num >= 0 and y.re_num >= 0:
            return sub(x, mul(y, trunc(div(x, y))))
        return mul(sign(x), mod(abs(x), abs(y)))
    two_pi = mul(TWO, PI)
    wrapped = log(exp(mul(div(two_pi, y), mul(I, x))))
    return mul(div(y, mul(two_pi, I)), wrapped)


# ======== comparison ========


def _order(x: ExactNumber, y: ExactNumber) -> Optional[int]:
    """-1, 0 or 1 for two rationals, None when either is nan."""
    if x.is_nan() or y.is_nan():
        return None
    if x.re_den == 0 or y.re_den == 0:
        x_rank = x.re_num if x.re_den == 0 else 0
        y_rank = y.re_num if y.re_den == 0 else 0
        return (x_rank > y_rank) - (x_rank < y_rank)
    lhs = x.re_num * y.re_den
    rhs = y.re_num * x.re_den
    return (lhs > rhs) - (lhs < rhs)


def _compare(x: ExactNumber, y: ExactNumber) -> Optional[int]:
    _require(x, y)
    if not (_is_real(x) and _is_real(y)):
        # Gaussian values are ordered by modulus only
        return _order(abs(x), abs(y))
    return _order(x, y)


def eq(x: ExactNumber, y: ExactNumber) -> bool:
    _require(x, y)
    return x.parts() == y.parts()


def ne(x: ExactNumber, y: ExactNumber) -> bool:
    return not eq(x, y)


def lt(x: ExactNumber, y: ExactNumber) -> bool:
    c = _compare(x, y)
    return c is not None and c < 0


def le(x: ExactNumber, y: ExactNumber) -> bool:
    c = _compare(x, y)
    return c is not None and c <= 0


def gt(x: ExactNumber, y: ExactNumber) -> bool:
    c = _compare(x, y)
    return c is not None and c > 0


def ge(x: ExactNumber, y: ExactNumber) -> bool:
    c = _compare(x, y)
    return c is not None and c >= 0


def max(*values: ExactNumber) -> ExactNumber:
    _require(*values)
    if not values:
        raise ValueError("max() expects at least one value")
    best = values[0]
    for value in values[1:]:
        if lt(best, value):
            best = value
    return best


def min(*values: ExactNumber) -> ExactNumber:
    _require(*values)
    if not values:
        raise ValueError("min() expects at least one value")
    best = values[0]
    for value in values[1:]:
        if gt(best, value):
            best = value
    return best


# ======== trigonometric ========


def sin(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.sin, x)
    # sin z = (e^iz - e^-iz) / 2i
    iz = mul(I, x)
    return div(sub(exp(iz), exp(neg(iz))), mul(TWO, I))


def cos(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.cos, x)
    # cos z = (e^iz + e^-iz) / 2
    iz = mul(I, x)
    return div(add(exp(iz), exp(neg(iz))), TWO)


def tan(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.tan, x)
    return div(sin(x), cos(x))


def asin(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _within(x, NEG_ONE, ONE):
        return _via_float(math.asin, x)
    # asin z = -i log(iz + sqrt(1 - z^2))
    root = sqrt(sub(ONE, mul(x, x)))
    return mul(neg(I), log(add(mul(I, x), root)))


def acos(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _within(x, NEG_ONE, ONE):
        return _via_float(math.acos, x)
    return sub(div(PI, TWO), asin(x))


def atan(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.atan, x)
    # atan z = i/2 (log(1 - iz) - log(1 + iz))
    iz = mul(I, x)
    return mul(div(I, TWO), sub(log(sub(ONE, iz)), log(add(ONE, iz))))


def atan2(y: ExactNumber, x: ExactNumber) -> ExactNumber:
    _require(y, x)
    if not (_is_real(y) and _is_real(x)):
        raise DomainError("atan2() only accepts rational arguments")
    return _via_float(math.atan2, y, x)


# ======== hyperbolic ========


def sinh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.sinh, x)
    return div(sub(exp(x), exp(neg(x))), TWO)


def cosh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.cosh, x)
    return div(add(exp(x), exp(neg(x))), TWO)


def tanh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.tanh, x)
    return div(sinh(x), cosh(x))


def asinh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.asinh, x)
    # asinh z = log(z + sqrt(z^2 + 1))
    return log(add(x, sqrt(add(mul(x, x), ONE))))


def acosh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x) and ge(x, ONE):
        return _via_float(math.acosh, x)
    # acosh z = log(z + sqrt(z + 1) sqrt(z - 1))
    return log(add(x, mul(sqrt(add(x, ONE)), sqrt(sub(x, ONE)))))


def atanh(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x) and gt(x, NEG_ONE) and lt(x, ONE):
        return _via_float(math.atanh, x)
    # atanh z = 1/2 log((1 + z) / (1 - z))
    return mul(HALF, log(div(add(ONE, x), sub(ONE, x))))


# ======== exponential and logarithm ========


def exp(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.exp, x)
    # e^(a+bi) = e^a (cos b + i sin b)
    b = x.imag
    return mul(exp(x.real), add(cos(b), mul(sin(b), I)))


def expm1(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x):
        return _via_float(math.expm1, x)
    return sub(exp(x), ONE)


def log(x: ExactNumber) -> ExactNumber:
    """Natural logarithm; principal value (Arg in (-π, π]) off the positive reals."""
    _require(x)
    if x.is_nan():
        return NAN
    if _is_real(x):
        if gt(x, ZERO):
            return _via_float(math.log, x)
        if x.is_zero():
            return NEG_INF
    # Log z = log|z| + i Arg z
    return add(log(abs(x)), mul(arg(x), I))


def log1p(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x) and gt(x, NEG_ONE):
        return _via_float(math.log1p, x)
    return log(add(x, ONE))


def log10(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x) and gt(x, ZERO):
        return _via_float(math.log10, x)
    return div(log(x), log(ExactNumber(10)))


def log2(x: ExactNumber) -> ExactNumber:
    _require(x)
    if _is_real(x) and gt(x, ZERO):
        return _via_float(math.log2, x)
    return div(log(x), log(TWO))


# ======== powers and roots ========


def _product_power(x: ExactNumber, k: int) -> ExactNumber:
    """x**k for k >= 1 by repeated squaring and multiplication."""
    result = ONE
    base = x
    while k:
        if k & 1:
            result = mul(result, base)
        base = mul(base, base)
        k >>= 1
    return result


def pow(x: ExactNumber, y: ExactNumber) -> ExactNumber:
    """x raised to y, principal value where several exist.

    Rules are tried in order and the first match wins:
      y == 0 -> 1; x == 0 -> 0;
      integer ** integer, rational ** integer and Gaussian ** integer exactly;
      positive rational ** positive rational through nth_root;
      negative rational ** positive rational: denominator 2 gives i times the
      root, an odd denominator gives the real root, any other even denominator
      the principal complex value;
      rational ** negative rational as 1 / x ** |y|;
      everything else as exp(y log x).
    """
    _require(x, y)
    if eq(y, ZERO):
        return ONE
    if eq(x, ZERO):
        return ZERO
    if y.domain is Domain.INTEGER:
        k = y.re_num
        if x.domain is Domain.INTEGER:
            if k > 0:
                return ExactNumber(x.re_num ** k)
            return div(ONE, pow(x, neg(y)))
        if x.domain is Domain.RATIONAL:
            if k > 0:
                return ExactNumber(x.re_num ** k, x.re_den ** k)
            return ExactNumber(x.re_den ** -k, x.re_num ** -k)
        if k > 0:
            return _product_power(x, k)
        return div(ONE, _product_power(x, -k))
    if _is_real(x) and y.domain is Domain.RATIONAL:
        if lt(y, ZERO):
            return div(ONE, pow(x, neg(y)))
        p, q = y.re_num, y.re_den
        if gt(x, ZERO):
            return newton.nth_root(pow(x, ExactNumber(p)), q)
        if lt(x, ZERO):
            magnitude = newton.nth_root(pow(neg(x), ExactNumber(p)), q)
            if q == 2:
                return mul(magnitude, pow(I, ExactNumber(p)))
            if q % 2 == 1:
                return neg(magnitude) if p % 2 else magnitude
            return orthogonal(magnitude, mul(PI, y))
    # pv z^w = e^(w Log z)
    return exp(mul(y, log(x)))


def sqrt(x: ExactNumber) -> ExactNumber:
    return pow(x, HALF)


def cbrt(x: ExactNumber) -> ExactNumber:
    return pow(x, THIRD)


def hypot(*values: ExactNumber) -> ExactNumber:
    """Square root of the sum of squared moduli."""
    _require(*values)
    total = ZERO
    for value in values:
        re, im = value.real, value.imag
        total = add(total, add(mul(re, re), mul(im, im)))
    return sqrt(total)


# ======== angles and polar form ========


def degrees(x: ExactNumber) -> ExactNumber:
    _require(x)
    return mul(x, div(ExactNumber(180), PI))


def radians(x: ExactNumber) -> ExactNumber:
    _require(x)
    return mul(x, div(PI, ExactNumber(180)))


def arg(x: ExactNumber) -> ExactNumber:
    """Principal argument in (-π, π]."""
    _require(x)
    return atan2(x.imag, x.real)


phase = arg


def polar(x: ExactNumber) -> Tuple[ExactNumber, ExactNumber]:
    return abs(x), phase(x)


def orthogonal(modulus: ExactNumber, amplitude: ExactNumber) -> ExactNumber:
    """modulus * (cos(amplitude) + i sin(amplitude))."""
    _require(modulus, amplitude)
    return add(mul(modulus, cos(amplitude)), mul(modulus, mul(I, sin(amplitude))))
