from __future__ import annotations
import math
import numbers
import struct
from enum import Enum
from typing import Tuple

class DomainError(TypeError):
	"""Raised when a value falls outside the domain an operation supports."""

class Domain(Enum):
	INTEGER = "Z"
	RATIONAL = "Q"
	GAUSSIAN = "Q[i]"

def _sign(n: int) -> int:
	return (n > 0) - (n < 0)

def _reduce(num: int, den: int) -> Tuple[int, int]:
	# zero denominators encode +inf (1/0), -inf (-1/0) and nan (0/0)
	if den == 0:
		return _sign(num), 0
	if den < 0:
		num, den = -num, -den
	g = math.gcd(num, den)
	return num // g, den // g

def _part_to_float(num: int, den: int) -> float:
	if den == 0:
		return math.copysign(math.inf, num) if num else math.nan
	return num / den

class ExactNumber:
	"""Immutable member of the tower Z < Q < Q[i].

	Stored as (re_num, re_den, im_num, im_den), each part in lowest terms with the
	sign on the numerator. The domain tag is always the narrowest one that fits.
	"""
	__slots__ = ("re_num", "re_den", "im_num", "im_den", "domain")

	def __init__(self, re_num: int, re_den: int = 1, im_num: int = 0, im_den: int = 1) -> None:
		for part in (re_num, re_den, im_num, im_den):
			if not isinstance(part, int):
				raise DomainError(f"ExactNumber parts must be integers, got {type(part).__name__}")
		rn, rd = _reduce(int(re_num), int(re_den))
		in_, id_ = _reduce(int(im_num), int(im_den))
		if in_ == 0 and id_ == 1:
			domain = Domain.INTEGER if rd == 1 else Domain.RATIONAL
		else:
			domain = Domain.GAUSSIAN
		object.__setattr__(self, "re_num", rn)
		object.__setattr__(self, "re_den", rd)
		object.__setattr__(self, "im_num", in_)
		object.__setattr__(self, "im_den", id_)
		object.__setattr__(self, "domain", domain)

	def __setattr__(self, name: str, value: object) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def __delattr__(self, name: str) -> None:
		raise AttributeError(f"{type(self).__name__} is immutable")

	def parts(self) -> Tuple[int, int, int, int]:
		return (self.re_num, self.re_den, self.im_num, self.im_den)
	@property
	def real(self) -> ExactNumber:
		return ExactNumber(self.re_num, self.re_den)
	@property
	def imag(self) -> ExactNumber:
		return ExactNumber(self.im_num, self.im_den)
	def conjugate(self) -> ExactNumber:
		return ExactNumber(self.re_num, self.re_den, -self.im_num, self.im_den)
	def numerator(self) -> int:
		return self.re_num
	def denominator(self) -> int:
		return self.re_den

	def is_zero(self) -> bool:
		return self.parts() == (0, 1, 0, 1)
	def is_integer(self) -> bool:
		return self.domain is Domain.INTEGER
	def is_rational(self) -> bool:
		# integers are rationals too
		return self.domain is not Domain.GAUSSIAN
	def is_gaussian(self) -> bool:
		return self.domain is Domain.GAUSSIAN
	def is_nan(self) -> bool:
		return (self.re_num, self.re_den) == (0, 0) or (self.im_num, self.im_den) == (0, 0)
	def is_infinite(self) -> bool:
		return not self.is_nan() and (self.re_den == 0 or self.im_den == 0)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return self.parts() == other.parts()
	def __hash__(self) -> int:
		return hash(self.parts())
	def __bool__(self) -> bool:
		return not self.is_zero()

	def __float__(self) -> float:
		if self.domain is Domain.GAUSSIAN:
			raise DomainError(f"cannot convert Gaussian rational {self} to float, use complex()")
		return _part_to_float(self.re_num, self.re_den)
	def __complex__(self) -> complex:
		return complex(_part_to_float(self.re_num, self.re_den), _part_to_float(self.im_num, self.im_den))

	# operators go through the arithmetic engine; native numbers are never coerced
	def __add__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.add(self, other)
	def __sub__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.sub(self, other)
	def __mul__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.mul(self, other)
	def __truediv__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.div(self, other)
	def __mod__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.mod(self, other)
	def __pow__(self, other: ExactNumber) -> ExactNumber:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.pow(self, other)
	def __neg__(self) -> ExactNumber:
		return arith.neg(self)
	def __pos__(self) -> ExactNumber:
		return self
	def __abs__(self) -> ExactNumber:
		return arith.abs(self)
	def __lt__(self, other: ExactNumber) -> bool:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.lt(self, other)
	def __le__(self, other: ExactNumber) -> bool:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.le(self, other)
	def __gt__(self, other: ExactNumber) -> bool:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.gt(self, other)
	def __ge__(self, other: ExactNumber) -> bool:
		if not isinstance(other, ExactNumber):
			return NotImplemented
		return arith.ge(self, other)

	def to_string(self) -> str:
		if self.domain is Domain.INTEGER:
			return str(self.re_num)
		if self.domain is Domain.RATIONAL:
			return f"{self.re_num}/{self.re_den}"
		return f"{self.re_num}/{self.re_den} + {self.im_num}/{self.im_den}i"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		if self.domain is Domain.GAUSSIAN:
			return f"ExactNumber({self.re_num}, {self.re_den}, {self.im_num}, {self.im_den})"
		return f"ExactNumber({self.re_num}, {self.re_den})"

def from_float(x: float) -> ExactNumber:
	"""Exact rational value of a binary64 float, read off its bit pattern."""
	x = float(x)
	if math.isnan(x):
		return ExactNumber(0, 0)
	if math.isinf(x):
		return ExactNumber(1 if x > 0 else -1, 0)
	bits = struct.unpack(">Q", struct.pack(">d", x))[0]
	sign = -1 if bits >> 63 else 1
	exponent_bits = (bits >> 52) & 0x7FF
	mantissa = bits & ((1 << 52) - 1)
	if exponent_bits == 0:
		# subnormal: no implicit leading bit
		exponent = -1022
	else:
		mantissa |= 1 << 52
		exponent = exponent_bits - 1023
	shift = 52 - exponent
	if shift <= 0:
		return ExactNumber(sign * (mantissa << -shift), 1)
	return ExactNumber(sign * mantissa, 1 << shift)

def new(value: object) -> ExactNumber:
	"""Narrowest tower member for an int, float, Fraction, complex or ExactNumber."""
	if isinstance(value, ExactNumber):
		return value
	if isinstance(value, numbers.Integral):
		return ExactNumber(int(value))
	if isinstance(value, numbers.Rational):
		return ExactNumber(int(value.numerator), int(value.denominator))
	if isinstance(value, numbers.Real):
		return from_float(float(value))
	if isinstance(value, numbers.Complex):
		z = complex(value)
		re, im = from_float(z.real), from_float(z.imag)
		return ExactNumber(re.re_num, re.re_den, im.re_num, im.re_den)
	raise DomainError(f"cannot build an ExactNumber from {type(value).__name__}")

# imported last: arith needs ExactNumber and new at import time
import arith  # noqa: E402
