"""Extended radix-2 evaluation domain.

For fields whose two-adicity s only supports power-of-two subgroups of order
2^s, a domain of size m = 2^(s+1) is built from two half-size pieces:

    D = {omega^i} U {shift * omega^i},   0 <= i < small_m = m / 2

where omega generates the order-small_m subgroup H and shift lies outside H.
Position i of an evaluation buffer holds the value at omega^i, position
small_m + i the value at shift * omega^i.

The vanishing polynomial factors over the two cosets:

    Z(x) = (x^small_m - 1) * (x^small_m - shift^small_m)
         = x^m - (shift^small_m + 1) * x^small_m + shift^small_m
"""

import logging
import math

from extended_domain.domain import EvaluationDomain
from extended_domain.errors import (
    DivisionByZeroError,
    IndexOutOfRangeError,
    InconsistentTwoAdicityError,
    InvalidShiftError,
    InvalidSizeError,
    SingularCosetError,
)
from extended_domain.field import FieldParams, coset_shift, primitive_root_of_order
from extended_domain.ntt import powers, radix2_lagrange_basis, radix2_transform

logger = logging.getLogger(__name__)


class ExtendedRadix2Domain(EvaluationDomain):
    """Evaluation domain of size 2 * 2^s split into a subgroup and its coset.

    Args:
        m: Domain size; must satisfy ceil(log2(m)) == s + 1
        params: Field description (two-adicity, multiplicative generator)
        shift: Coset shift override; defaults to the field's coset_shift()

    Raises:
        InvalidSizeError: If m <= 1 or m is not a power of two
        InconsistentTwoAdicityError: If the field's two-adicity does not match m
        InvalidShiftError: If the shift override is zero
    """

    def __init__(self, m: int, params: FieldParams, shift=None) -> None:
        if m <= 1:
            raise InvalidSizeError(f"Extended radix-2 domain expects m > 1, got {m}")

        logm = math.ceil(math.log2(m))
        if logm != params.two_adicity + 1:
            raise InconsistentTwoAdicityError(
                f"Extended radix-2 domain expects log2(m) == s + 1, "
                f"got log2(m) = {logm}, s = {params.two_adicity}"
            )
        if m & (m - 1):
            raise InvalidSizeError(f"Extended radix-2 domain expects a power of two, got {m}")

        super().__init__(m, params)
        self._small_m = m // 2
        self._omega = primitive_root_of_order(params, self._small_m)
        self._shift = coset_shift(params) if shift is None else params.element(shift)
        if self._shift == 0:
            raise InvalidShiftError("Extended radix-2 domain expects a non-zero coset shift")

        logger.debug(
            "ExtendedRadix2Domain(m=%d) over GF(%d): omega=%d shift=%d",
            m, params.prime, int(self._omega), int(self._shift),
        )

    @property
    def small_m(self) -> int:
        return self._small_m

    @property
    def omega(self):
        """Primitive small_m-th root of unity."""
        return self._omega

    @property
    def shift(self):
        """Coset shift, outside the order-small_m subgroup."""
        return self._shift

    def _shift_to_small_m(self):
        return self._shift ** self._small_m

    # --- Transforms ---

    def forward_transform(self, buffer):
        """Coefficients -> evaluations over D.

        Folds the m coefficients into two length-small_m sequences,
            a0[i] = a[i] + a[small_m + i]
            a1[i] = shift^i * (a[i] + shift^small_m * a[small_m + i])
        whose radix-2 transforms are the evaluations on H and on shift * H.

        Raises:
            SizeMismatchError: If the buffer holds more than m coefficients
        """
        a = self._load(buffer)
        half = self._small_m
        lo, hi = a[:half], a[half:]

        a0 = lo + hi
        a1 = powers(self.field, self._shift, half) * (lo + self._shift_to_small_m() * hi)

        radix2_transform(a0, self._omega)
        radix2_transform(a1, self._omega)

        a[:half] = a0
        a[half:] = a1
        return self._store(buffer, a)

    def inverse_transform(self, buffer):
        """Evaluations over D -> coefficients.

        Runs the unnormalised radix-2 transform with omega^-1 on each half
        (giving small_m times the folded sequences) and unfolds with
        sconst = [small_m * (1 - shift^small_m)]^-1.

        Raises:
            SizeMismatchError: If the buffer holds more than m values
            SingularCosetError: If shift^small_m == 1
        """
        a = self._load(buffer)
        half = self._small_m
        shift_to_small_m = self._shift_to_small_m()
        denom = self.field(half) * (self._params.one() - shift_to_small_m)
        if denom == 0:
            raise SingularCosetError("shift^small_m == 1: coset coincides with the subgroup")

        a0 = a[:half].copy()
        a1 = a[half:].copy()
        omega_inv = self._omega ** -1
        radix2_transform(a0, omega_inv)
        radix2_transform(a1, omega_inv)

        sconst = denom ** -1
        shifted = powers(self.field, self._shift ** -1, half) * a1

        a[:half] = sconst * (-shift_to_small_m * a0 + shifted)
        a[half:] = sconst * (a0 - shifted)
        return self._store(buffer, a)

    # --- Closed Forms ---

    def lagrange_basis_at(self, t):
        """Evaluate all m Lagrange basis polynomials of D at t.

        The subgroup basis T0 (at t) and T1 (at t / shift) are rescaled by
            T0_coeff = -(t^small_m - shift^small_m) / (shift^small_m - 1)
            T1_coeff =  (t^small_m - 1) / (shift^small_m - 1)

        Raises:
            SingularCosetError: If shift^small_m == 1
        """
        t = self._params.element(t)
        shift_to_small_m = self._shift_to_small_m()
        denom = shift_to_small_m - self._params.one()
        if denom == 0:
            raise SingularCosetError("shift^small_m == 1: Lagrange basis is undefined")

        half = self._small_m
        t0 = radix2_lagrange_basis(half, t, self._omega)
        t1 = radix2_lagrange_basis(half, t * self._shift ** -1, self._omega)

        one_over_denom = denom ** -1
        t_to_small_m = t ** half
        t0_coeff = -(t_to_small_m - shift_to_small_m) * one_over_denom
        t1_coeff = (t_to_small_m - self._params.one()) * one_over_denom

        result = self.field.Zeros(self._m)
        result[:half] = t0 * t0_coeff
        result[half:] = t1 * t1_coeff
        return result

    def domain_element(self, index: int):
        """omega^index for index < small_m, else shift * omega^(index - small_m).

        Raises:
            IndexOutOfRangeError: If index is outside [0, m)
        """
        if index < 0 or index >= self._m:
            raise IndexOutOfRangeError(f"Domain index {index} out of range [0, {self._m})")
        if index < self._small_m:
            return self._omega ** index
        return self._shift * self._omega ** (index - self._small_m)

    def vanishing_polynomial_at(self, t):
        """Z(t) = (t^small_m - 1) * (t^small_m - shift^small_m)."""
        t_to_small_m = self._params.element(t) ** self._small_m
        return (t_to_small_m - self._params.one()) * (t_to_small_m - self._shift_to_small_m())

    def accumulate_vanishing_polynomial(self, coeff, into) -> None:
        """Add coeff * Z(x) into a coefficient buffer of length >= m + 1.

        Only slots 0, small_m and m change. The buffer is never resized.
        """
        coeff = self._params.element(coeff)
        shift_to_small_m = self._shift_to_small_m()
        element = self._params.element

        into[self._m] = element(into[self._m]) + coeff
        into[self._small_m] = element(into[self._small_m]) - coeff * (shift_to_small_m + self._params.one())
        into[0] = element(into[0]) + coeff * shift_to_small_m

    def divide_by_vanishing_on_coset(self, buffer):
        """Divide evaluations of P on g * D by Z at the same points.

        Z is constant on each half of g * D:
            Z0 = (g^small_m - 1) * (g^small_m - shift^small_m)
            Z1 = (g^small_m * shift^small_m - 1) * (g^small_m * shift^small_m - shift^small_m)
        where g is the field's multiplicative generator.

        Raises:
            SizeMismatchError: If the buffer length is not m
            DivisionByZeroError: If g * D meets D (Z0 or Z1 is zero)
        """
        a = self._load(buffer, exact=True)
        one = self._params.one()
        coset_to_small_m = self._params.generator() ** self._small_m
        shift_to_small_m = self._shift_to_small_m()

        z0 = (coset_to_small_m - one) * (coset_to_small_m - shift_to_small_m)
        z1 = (coset_to_small_m * shift_to_small_m - one) * (coset_to_small_m * shift_to_small_m - shift_to_small_m)
        if z0 == 0 or z1 == 0:
            raise DivisionByZeroError(
                f"Vanishing polynomial is zero on the coset of GF({self._params.prime}) generator"
            )

        half = self._small_m
        a[:half] = a[:half] * z0 ** -1
        a[half:] = a[half:] * z1 ** -1
        return self._store(buffer, a)
