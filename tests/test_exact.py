from fractions import Fraction

import pytest

from exact import Domain, DomainError, ExactNumber, from_float, new


class TestNormalisation:
    """Every construction path reduces and narrows."""

    def test_reduces_to_lowest_terms(self):
        assert ExactNumber(2, 4).parts() == (1, 2, 0, 1)
        assert ExactNumber(3, -6).parts() == (-1, 2, 0, 1)
        assert ExactNumber(1, 2, 6, -8).parts() == (1, 2, -3, 4)

    def test_renormalising_is_idempotent(self):
        x = ExactNumber(10, -15, 4, 6)
        assert ExactNumber(*x.parts()) == x

    @pytest.mark.parametrize("parts, domain", [
        ((4, 2), Domain.INTEGER),
        ((1, 1, 0, 5), Domain.INTEGER),
        ((1, 3), Domain.RATIONAL),
        ((1, 3, 0, 7), Domain.RATIONAL),
        ((1, 2, 3, 4), Domain.GAUSSIAN),
        ((0, 1, 1, 1), Domain.GAUSSIAN),
    ])
    def test_narrowest_domain(self, parts, domain):
        assert ExactNumber(*parts).domain is domain

    def test_equal_values_share_a_hash(self):
        assert hash(ExactNumber(2, 4)) == hash(ExactNumber(1, 2))
        assert len({ExactNumber(2, 4), ExactNumber(-3, -6)}) == 1

    def test_non_integer_parts_raise(self):
        with pytest.raises(DomainError):
            ExactNumber(0.5)

    def test_values_are_immutable(self):
        x = ExactNumber(1, 2)
        with pytest.raises(AttributeError):
            x.re_num = 3


class TestSentinels:
    def test_zero_denominators(self):
        assert ExactNumber(5, 0).parts() == (1, 0, 0, 1)
        assert ExactNumber(-3, 0).parts() == (-1, 0, 0, 1)
        assert ExactNumber(0, 0).is_nan()

    def test_float_images(self):
        assert float(ExactNumber(1, 0)) == float("inf")
        assert float(ExactNumber(-1, 0)) == float("-inf")
        assert float(ExactNumber(0, 0)) != float(ExactNumber(0, 0))

    def test_predicates(self):
        assert ExactNumber(1, 0).is_infinite()
        assert not ExactNumber(0, 0).is_infinite()
        assert not ExactNumber(7).is_infinite()


class TestFloatConversion:
    def test_exact_binary_value(self):
        assert from_float(0.1) == ExactNumber(3602879701896397, 36028797018963968)
        assert from_float(-2.5) == ExactNumber(-5, 2)
        assert from_float(0.0).is_zero()
        assert from_float(2.0 ** 70) == ExactNumber(2 ** 70)

    @pytest.mark.parametrize("x", [0.1, -2.5, 1 / 3, 1e300, 5e-324, -2.2250738585072014e-308])
    def test_float_recovers_input(self, x):
        assert float(from_float(x)) == x

    def test_subnormal(self):
        assert from_float(5e-324) == ExactNumber(1, 2 ** 1074)

    def test_special_values(self):
        assert from_float(float("nan")).is_nan()
        assert from_float(float("inf")) == ExactNumber(1, 0)
        assert from_float(float("-inf")) == ExactNumber(-1, 0)


class TestNew:
    def test_native_numbers(self):
        assert new(3).domain is Domain.INTEGER
        assert new(0.5) == ExactNumber(1, 2)
        assert new(Fraction(3, 6)) == ExactNumber(1, 2)
        assert new(2 + 0.5j) == ExactNumber(2, 1, 1, 2)
        assert new(3 + 0j).domain is Domain.INTEGER

    def test_existing_value_passes_through(self):
        x = ExactNumber(1, 3)
        assert new(x) is x

    @pytest.mark.parametrize("value", ["1", None, [1]])
    def test_rejects_other_types(self, value):
        with pytest.raises(DomainError):
            new(value)


class TestAccessors:
    def test_parts(self):
        z = ExactNumber(1, 2, -3, 4)
        assert z.real == ExactNumber(1, 2)
        assert z.imag == ExactNumber(-3, 4)
        assert z.conjugate() == ExactNumber(1, 2, 3, 4)
        assert (z.numerator(), z.denominator()) == (1, 2)

    def test_float_of_gaussian_raises(self):
        with pytest.raises(DomainError):
            float(ExactNumber(1, 2, 3, 4))

    def test_complex(self):
        assert complex(ExactNumber(1, 2, -3, 4)) == 0.5 - 0.75j
        assert complex(ExactNumber(7)) == 7 + 0j

    @pytest.mark.parametrize("value, text", [
        (ExactNumber(3), "3"),
        (ExactNumber(-1, 2), "-1/2"),
        (ExactNumber(1, 2, 3, 4), "1/2 + 3/4i"),
        (ExactNumber(2, 1, -1, 1), "2/1 + -1/1i"),
    ])
    def test_str(self, value, text):
        assert str(value) == text

    def test_bool(self):
        assert not ExactNumber(0)
        assert ExactNumber(0, 1, 1, 1)


class TestOperators:
    def test_delegate_to_arith(self):
        half, third = ExactNumber(1, 2), ExactNumber(1, 3)
        assert half + third == ExactNumber(5, 6)
        assert half - third == ExactNumber(1, 6)
        assert half * third == ExactNumber(1, 6)
        assert half / third == ExactNumber(3, 2)
        assert ExactNumber(7) % ExactNumber(3) == ExactNumber(1)
        assert ExactNumber(2) ** ExactNumber(-3) == ExactNumber(1, 8)
        assert -half == ExactNumber(-1, 2)
        assert abs(ExactNumber(-3, 4)) == ExactNumber(3, 4)
        assert third < half <= half
        assert half > third >= third

    def test_no_implicit_coercion(self):
        with pytest.raises(TypeError):
            ExactNumber(1) + 1
        with pytest.raises(TypeError):
            ExactNumber(1) < 2.0
        assert ExactNumber(1) != 1
