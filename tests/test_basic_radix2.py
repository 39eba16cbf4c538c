"""Tests for the basic radix-2 evaluation domain."""

import numpy as np
import pytest

from extended_domain.basic_radix2 import BasicRadix2Domain
from extended_domain.errors import (
    InconsistentTwoAdicityError,
    IndexOutOfRangeError,
    InvalidSizeError,
    SizeMismatchError,
)
from extended_domain.field import GOLDILOCKS
from extended_domain.polynomial import evaluate


class TestBasicRadix2Domain:
    """Interface conformance over the order-m subgroup."""

    @pytest.mark.parametrize("m", [2, 4, 8])
    def test_forward_matches_schoolbook_evaluation(self, field_params, m: int) -> None:
        params = field_params(41)
        domain = BasicRadix2Domain(m, params)
        coeffs = params.field.Random(m, seed=11)

        evals = domain.forward_transform(coeffs.copy())

        for i in range(m):
            assert evals[i] == evaluate(coeffs, domain.omega ** i)

    @pytest.mark.parametrize("n_bits", [3, 4, 6, 8])
    def test_roundtrip_goldilocks(self, n_bits: int) -> None:
        m = 1 << n_bits
        domain = BasicRadix2Domain(m, GOLDILOCKS)
        coeffs = GOLDILOCKS.field.Random(m, seed=12)

        buffer = coeffs.copy()
        domain.forward_transform(buffer)
        domain.inverse_transform(buffer)

        assert np.array_equal(buffer, coeffs)

    @pytest.mark.parametrize("n_bits", [3, 4, 6])
    def test_constant_polynomial(self, n_bits: int) -> None:
        """Every evaluation of a constant polynomial is the constant."""
        m = 1 << n_bits
        F = GOLDILOCKS.field
        domain = BasicRadix2Domain(m, GOLDILOCKS)

        evals = domain.forward_transform([F(5)])

        assert len(evals) == m
        assert all(v == F(5) for v in evals)

    def test_lagrange_basis_identity(self, field_params) -> None:
        domain = BasicRadix2Domain(8, field_params(41))
        for j in range(8):
            basis = domain.lagrange_basis_at(domain.domain_element(j))
            assert [int(v) for v in basis] == [1 if k == j else 0 for k in range(8)]

    def test_lagrange_basis_off_domain(self, field_params) -> None:
        params = field_params(41)
        domain = BasicRadix2Domain(8, params)
        coeffs = params.field.Random(8, seed=13)
        t = params.generator()

        evals = domain.forward_transform(coeffs.copy())
        basis = domain.lagrange_basis_at(t)

        assert np.sum(basis * evals) == evaluate(coeffs, t)

    def test_vanishing_polynomial(self, field_params) -> None:
        params = field_params(41)
        F = params.field
        domain = BasicRadix2Domain(8, params)

        for i in range(8):
            assert domain.vanishing_polynomial_at(domain.domain_element(i)) == 0
        assert domain.vanishing_polynomial_at(params.generator()) != 0

        buffer = [F(0)] * 9
        domain.accumulate_vanishing_polynomial(F(4), buffer)
        assert [int(v) for v in buffer] == [int(-F(4))] + [0] * 7 + [4]

        t = F(17)
        assert evaluate(buffer, t) == F(4) * domain.vanishing_polynomial_at(t)

    def test_divide_by_vanishing_on_coset(self, field_params) -> None:
        params = field_params(41)
        domain = BasicRadix2Domain(8, params)
        g = params.generator()
        values = params.field.Random(8, seed=14)

        result = domain.divide_by_vanishing_on_coset(values.copy())

        for i in range(8):
            z = domain.vanishing_polynomial_at(g * domain.domain_element(i))
            assert result[i] * z == values[i]

    def test_errors(self, field_params) -> None:
        params = field_params(41)
        with pytest.raises(InvalidSizeError):
            BasicRadix2Domain(1, params)
        with pytest.raises(InvalidSizeError):
            BasicRadix2Domain(6, params)
        with pytest.raises(InconsistentTwoAdicityError):
            BasicRadix2Domain(16, params)

        domain = BasicRadix2Domain(4, params)
        with pytest.raises(IndexOutOfRangeError):
            domain.domain_element(4)
        with pytest.raises(SizeMismatchError):
            domain.forward_transform([params.field(1)] * 5)
