"""Basic radix-2 evaluation domain: the multiplicative subgroup of order m.

Usable whenever m is a power of two with m <= 2^s. Position i of an
evaluation buffer holds the value at omega^i and Z(x) = x^m - 1.
"""

import logging

from extended_domain.domain import EvaluationDomain
from extended_domain.errors import (
    DivisionByZeroError,
    IndexOutOfRangeError,
    InconsistentTwoAdicityError,
    InvalidSizeError,
)
from extended_domain.field import FieldParams, primitive_root_of_order
from extended_domain.ntt import (
    log2_pow2,
    radix2_inverse_transform,
    radix2_lagrange_basis,
    radix2_transform,
)

logger = logging.getLogger(__name__)


class BasicRadix2Domain(EvaluationDomain):
    """Evaluation domain over the order-m subgroup <omega>.

    Raises:
        InvalidSizeError: If m <= 1 or m is not a power of two
        InconsistentTwoAdicityError: If m > 2^s
    """

    def __init__(self, m: int, params: FieldParams) -> None:
        if m <= 1:
            raise InvalidSizeError(f"Basic radix-2 domain expects m > 1, got {m}")
        if m & (m - 1):
            raise InvalidSizeError(f"Basic radix-2 domain expects a power of two, got {m}")
        if log2_pow2(m) > params.two_adicity:
            raise InconsistentTwoAdicityError(
                f"Basic radix-2 domain expects log2(m) <= s, got log2(m) = {log2_pow2(m)}, s = {params.two_adicity}"
            )

        super().__init__(m, params)
        self._omega = primitive_root_of_order(params, m)

        logger.debug("BasicRadix2Domain(m=%d) over GF(%d): omega=%d", m, params.prime, int(self._omega))

    @property
    def omega(self):
        return self._omega

    def forward_transform(self, buffer):
        a = self._load(buffer)
        radix2_transform(a, self._omega)
        return self._store(buffer, a)

    def inverse_transform(self, buffer):
        a = self._load(buffer)
        radix2_inverse_transform(a, self._omega)
        return self._store(buffer, a)

    def lagrange_basis_at(self, t):
        return radix2_lagrange_basis(self._m, self._params.element(t), self._omega)

    def domain_element(self, index: int):
        if index < 0 or index >= self._m:
            raise IndexOutOfRangeError(f"Domain index {index} out of range [0, {self._m})")
        return self._omega ** index

    def vanishing_polynomial_at(self, t):
        return self._params.element(t) ** self._m - self._params.one()

    def accumulate_vanishing_polynomial(self, coeff, into) -> None:
        coeff = self._params.element(coeff)
        element = self._params.element
        into[self._m] = element(into[self._m]) + coeff
        into[0] = element(into[0]) - coeff

    def divide_by_vanishing_on_coset(self, buffer):
        """Scale every evaluation on g * <omega> by (g^m - 1)^-1."""
        a = self._load(buffer, exact=True)
        z = self._params.generator() ** self._m - self._params.one()
        if z == 0:
            raise DivisionByZeroError(f"Vanishing polynomial is zero on the coset of GF({self._params.prime}) generator")
        a[:] = a * z ** -1
        return self._store(buffer, a)
