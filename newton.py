"""
Newton Root Module

n-th roots of non-negative rationals by Newton's method on f(x) = x^n - m.
Each step is exact; the fractional part of the new iterate is then replaced by
its nearest binary64 value so numerators and denominators stay bounded.
"""
from __future__ import annotations
import logging

from exact import DomainError, ExactNumber, from_float
import arith

LOG = logging.getLogger(__name__)

NEWTON_MAX_ITERATIONS = 65536


def _rebound(x: ExactNumber) -> ExactNumber:
    """Keep the integer part of x exact and round its fractional part to a float."""
    whole = arith.floor(x)
    frac = arith.sub(x, whole)
    return arith.add(whole, from_float(float(frac)))


def nth_root(m: ExactNumber, n: int, max_iter: int = NEWTON_MAX_ITERATIONS) -> ExactNumber:
    """Approximate m^(1/n) starting from x0 = 1.

    Stops when an iterate repeats its predecessor, or the one before that
    (a float rounding oscillation), or after max_iter steps. Perfect powers
    converge to the exact root.
    """
    if not isinstance(m, ExactNumber):
        raise DomainError(f"nth_root() expects an ExactNumber, got {type(m).__name__}")
    if m.is_gaussian():
        raise DomainError(f"nth_root() expects a rational radicand, got {m}")
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise DomainError(f"nth_root() expects an integer degree >= 1, got {n!r}")
    if m.is_nan() or m.denominator() == 0:
        return m
    if m.is_zero():
        return m
    if m.numerator() < 0:
        raise DomainError(f"nth_root() expects a non-negative radicand, got {m}")
    if n == 1:
        return m

    degree = ExactNumber(n)
    lower = ExactNumber(n - 1)
    previous = None
    x = arith.ONE
    for _ in range(max_iter):
        # x - (x^n - m) / (n x^(n-1))
        power = arith.pow(x, lower)
        step = arith.div(arith.sub(arith.mul(power, x), m), arith.mul(degree, power))
        nxt = _rebound(arith.sub(x, step))
        if nxt == x:
            return nxt
        if nxt == previous:
            LOG.debug("nth_root(%s, %d) stopped on a two-step cycle", m, n)
            return nxt
        previous, x = x, nxt
    LOG.debug("nth_root(%s, %d) reached the %d iteration cap", m, n, max_iter)
    return x
