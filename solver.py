"""
Cubic Solver Module

Solves polynomial equations of degree at most three over the ExactNumber tower.
Exact rational roots are looked for first (Rational Root Theorem) and factored
out by synthetic division; what is left goes to the quadratic formula, the
linear formula or Cardano's closed form.
"""
from __future__ import annotations
import logging
import math
from typing import List

import arith
from exact import DomainError, ExactNumber, new

LOG = logging.getLogger(__name__)

RATIONAL_ROOT_SEARCH_LIMIT = 100

ZERO = ExactNumber(0)
TWO = ExactNumber(2)
THREE = ExactNumber(3)
FOUR = ExactNumber(4)
# primitive cube roots of unity, -1/2 +- (sqrt(3)/2) i
_HALF_SQRT3 = arith.div(arith.sqrt(THREE), TWO)
OMEGA_PLUS = arith.add(ExactNumber(-1, 2), arith.mul(_HALF_SQRT3, arith.I))
OMEGA_MINUS = arith.conjugate(OMEGA_PLUS)


def _is_exact_rational(x: ExactNumber) -> bool:
    return x.is_rational() and x.denominator() != 0


def _divisors(n: int, limit: int) -> List[int]:
    n = abs(n)
    return [k for k in range(1, min(n, limit) + 1) if n % k == 0]


class CubicSolver:
    """Root finder for a0 + a1*x + a2*x^2 + a3*x^3 = 0 with tower coefficients."""

    def __init__(self, search_limit: int = RATIONAL_ROOT_SEARCH_LIMIT):
        self.search_limit = search_limit

    def solve(self, a: ExactNumber, b: ExactNumber, c: ExactNumber, d: ExactNumber) -> List[ExactNumber]:
        """
        Solve a*x^3 + b*x^2 + c*x + d = 0.

        Vanishing leading coefficients lower the degree. Repeated roots appear
        as many times as their multiplicity.

        Returns:
            Up to three roots, possibly Gaussian
        """
        return self.solve_polynomial([d, c, b, a])

    def solve_polynomial(self, coeffs: List[ExactNumber]) -> List[ExactNumber]:
        """
        Solve a polynomial of degree <= 3.

        Args:
            coeffs: List of coefficients [a0, a1, ..., an] for a0 + a1*x + ... + an*x^n = 0

        Returns:
            List of roots; empty for constant polynomials
        """
        coeffs = [new(c) for c in coeffs]
        while coeffs and coeffs[-1].is_zero():
            coeffs.pop()

        degree = len(coeffs) - 1
        if degree < 1:
            # c = 0 has either no root or every root
            return []
        if degree > 3:
            raise DomainError(f"cannot solve a polynomial of degree {degree}")

        if degree >= 2 and all(_is_exact_rational(c) for c in coeffs):
            rational_roots = self.find_rational_roots(coeffs)
            if rational_roots:
                root = rational_roots[0]
                LOG.debug("found rational root %s of degree-%d polynomial", root, degree)
                return [root] + self.solve_polynomial(self.synthetic_divide(coeffs, root))

        if degree == 1:
            return self.solve_linear(coeffs)
        if degree == 2:
            return self.solve_quadratic(coeffs)

        LOG.debug("no rational root, falling back to Cardano")
        return self.cardano(coeffs[3], coeffs[2], coeffs[1], coeffs[0])

    def solve_linear(self, coeffs: List[ExactNumber]) -> List[ExactNumber]:
        """Solve b*x + c = 0 given [c, b]."""
        c, b = coeffs[0], coeffs[1]
        if b.is_zero():
            return []
        return [arith.div(arith.neg(c), b)]

    def solve_quadratic(self, coeffs: List[ExactNumber]) -> List[ExactNumber]:
        """
        Solve a*x^2 + b*x + c = 0 given [c, b, a].

        Uses x = (-b +- sqrt(b^2 - 4ac)) / 2a; a negative discriminant gives a
        conjugate pair.
        """
        c, b, a = coeffs
        if a.is_zero():
            return self.solve_linear(coeffs[:2])

        two_a = arith.mul(TWO, a)
        neg_b = arith.neg(b)
        discriminant = arith.sub(arith.mul(b, b), arith.mul(FOUR, arith.mul(a, c)))
        if discriminant.is_zero():
            root = arith.div(neg_b, two_a)
            return [root, root]

        sqrt_disc = arith.sqrt(discriminant)
        return [
            arith.div(arith.add(neg_b, sqrt_disc), two_a),
            arith.div(arith.sub(neg_b, sqrt_disc), two_a),
        ]

    def cardano(self, a: ExactNumber, b: ExactNumber, c: ExactNumber, d: ExactNumber) -> List[ExactNumber]:
        """
        Cardano's formula for a*x^3 + b*x^2 + c*x + d = 0, a != 0.

            A  = -b / 3a
            B  = -2b^3 + 9abc - 27a^2 d
            C  = 3 (27a^2 d^2 - 18abcd + 4b^3 d + 4ac^3 - b^2 c^2)
            R+ = cbrt(B / 54a^3 + sqrt(C) / 18a^2)
            R- = cbrt(B / 54a^3 - sqrt(C) / 18a^2)

        R+ is built from whichever of B / 54a^3 +- sqrt(C) / 18a^2 has the larger
        modulus, so an approximate sqrt(C) never cancels it down to a residue.
        R+ R- must equal (b^2 - 3ac) / 9a^2, so R- is taken from that product
        whenever R+ is non-zero; independent principal cube roots can pair up
        wrongly for complex coefficients.

        Roots are A + R+ + R-, A + w+ R+ + w- R- and A + w- R+ + w+ R-, with
        w+- the primitive cube roots of unity. Real roots can come back with
        a tiny imaginary residue from the principal cube roots.
        """
        a, b, c, d = new(a), new(b), new(c), new(d)
        if a.is_zero():
            raise DomainError("cardano() needs a non-zero cubic coefficient")
        mul, add, sub, div = arith.mul, arith.add, arith.sub, arith.div

        a2 = mul(a, a)
        b2 = mul(b, b)
        b3 = mul(b2, b)
        abc = mul(a, mul(b, c))

        shift = arith.neg(div(b, mul(THREE, a)))
        big_b = add(sub(mul(ExactNumber(9), abc), mul(TWO, b3)), mul(ExactNumber(-27), mul(a2, d)))
        big_c = mul(THREE, add(
            sub(mul(ExactNumber(27), mul(a2, mul(d, d))), mul(ExactNumber(18), mul(abc, d))),
            sub(add(mul(FOUR, mul(b3, d)), mul(FOUR, mul(a, mul(c, mul(c, c))))), mul(b2, mul(c, c))),
        ))

        centre = div(big_b, mul(ExactNumber(54), mul(a2, a)))
        spread = div(arith.sqrt(big_c), mul(ExactNumber(18), a2))
        if abs(complex(sub(centre, spread))) > abs(complex(add(centre, spread))):
            spread = arith.neg(spread)
        r_plus = arith.cbrt(add(centre, spread))
        if r_plus.is_zero():
            r_minus = arith.cbrt(sub(centre, spread))
        else:
            r_minus = div(sub(b2, mul(THREE, mul(a, c))), mul(ExactNumber(9), mul(a2, r_plus)))

        return [
            add(shift, add(r_plus, r_minus)),
            add(shift, add(mul(OMEGA_PLUS, r_plus), mul(OMEGA_MINUS, r_minus))),
            add(shift, add(mul(OMEGA_MINUS, r_plus), mul(OMEGA_PLUS, r_minus))),
        ]

    def find_rational_roots(self, coeffs: List[ExactNumber]) -> List[ExactNumber]:
        """
        Find rational roots using Rational Root Theorem.

        Coefficients are first scaled to integers. If p/q is a root, then:
        - p divides the constant term
        - q divides the leading coefficient
        Divisors above the search limit are not tried.

        Returns the distinct roots found, in increasing order.
        """
        if len(coeffs) < 2:
            return []
        if coeffs[0].is_zero():
            return [ZERO]

        scale = 1
        for coeff in coeffs:
            scale = scale * coeff.denominator() // math.gcd(scale, coeff.denominator())
        integers = [coeff.numerator() * (scale // coeff.denominator()) for coeff in coeffs]

        roots = []
        for p in _divisors(integers[0], self.search_limit):
            for q in _divisors(integers[-1], self.search_limit):
                for candidate in (ExactNumber(p, q), ExactNumber(-p, q)):
                    if candidate in roots:
                        continue
                    if self.evaluate_polynomial(coeffs, candidate).is_zero():
                        roots.append(candidate)
        roots.sort(key=lambda r: r.numerator() / r.denominator())
        return roots

    def evaluate_polynomial(self, coeffs: List[ExactNumber], x: ExactNumber) -> ExactNumber:
        """Evaluate polynomial at x using Horner's method."""
        result = ZERO
        for i in range(len(coeffs) - 1, -1, -1):
            result = arith.add(arith.mul(result, x), coeffs[i])
        return result

    def synthetic_divide(self, coeffs: List[ExactNumber], root: ExactNumber) -> List[ExactNumber]:
        """
        Divide polynomial by (x - root) using synthetic division.

        Returns coefficients of the quotient polynomial; the remainder is dropped.
        """
        if len(coeffs) < 2:
            return []

        result = []
        carry = ZERO
        for i in range(len(coeffs) - 1, 0, -1):
            carry = arith.add(coeffs[i], arith.mul(carry, root))
            result.append(carry)

        # back to [a0, a1, ..., an]
        result.reverse()
        return result


_default_solver = CubicSolver()


def solve_cubic(a, b, c, d) -> List[ExactNumber]:
    """Roots of a*x^3 + b*x^2 + c*x + d, exact where they are rational."""
    return _default_solver.solve(new(a), new(b), new(c), new(d))


def cardano(a, b, c, d) -> List[ExactNumber]:
    return _default_solver.cardano(a, b, c, d)


def find_rational_roots(coeffs: List[ExactNumber]) -> List[ExactNumber]:
    return _default_solver.find_rational_roots(coeffs)
