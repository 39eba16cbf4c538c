"""Prime field description, root/shift providers and batch inversion.

Uses galois for all field arithmetic. A domain never looks up field constants
by type: everything it needs (two-adicity, multiplicative generator) travels in
an explicit FieldParams value handed to its constructor.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Optional, Type

import galois

from extended_domain.errors import NoRootOfUnityError

# --- Field Description ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001


def _two_adicity(order: int) -> int:
    """Largest s with 2^s dividing order."""
    return (order & -order).bit_length() - 1


@dataclass(frozen=True)
class FieldParams:
    """Explicit description of a prime field GF(p).

    Attributes:
        prime: Field characteristic p
        two_adicity: Largest s with 2^s | (p - 1)
        multiplicative_generator: Generator g of the multiplicative group
        field: galois FieldArray class for GF(p)
    """

    prime: int
    two_adicity: int
    multiplicative_generator: int
    field: Type[galois.FieldArray] = dataclass_field(repr=False, compare=False)

    @classmethod
    def from_prime(cls, prime: int, generator: Optional[int] = None) -> "FieldParams":
        """Describe GF(prime), deriving s from p - 1 and g from galois if not given."""
        gf = galois.GF(prime)
        if generator is None:
            generator = int(gf.primitive_element)
        return cls(
            prime=prime,
            two_adicity=_two_adicity(prime - 1),
            multiplicative_generator=generator,
            field=gf,
        )

    def element(self, value):
        """Coerce an int or field scalar into this field."""
        return self.field(int(value) % self.prime)

    def zero(self):
        return self.field(0)

    def one(self):
        return self.field(1)

    def generator(self):
        return self.field(self.multiplicative_generator)


GOLDILOCKS = FieldParams.from_prime(GOLDILOCKS_PRIME, generator=7)
"""Goldilocks field, p = 2^64 - 2^32 + 1 (s = 32, g = 7)."""


# --- Root / Shift Providers ---

def primitive_root_of_order(params: FieldParams, n: int):
    """Return an element of exact multiplicative order n (a power of two).

    Uses g^((p-1)/n) for the field's multiplicative generator g.

    Raises:
        NoRootOfUnityError: If n is not a power of two or exceeds 2^s
    """
    if n <= 0 or (n & (n - 1)) != 0:
        raise NoRootOfUnityError(f"Root order must be a power of two, got {n}")
    if n > (1 << params.two_adicity):
        raise NoRootOfUnityError(
            f"GF({params.prime}) has no root of unity of order {n} (two-adicity {params.two_adicity})"
        )
    return params.field(pow(params.multiplicative_generator, (params.prime - 1) // n, params.prime))


def coset_shift(params: FieldParams):
    """Return the fixed coset shift g^2.

    g^2 has order (p - 1) / 2, which is not a power of two unless p is a Fermat
    prime, so it lies outside every power-of-two-order subgroup of the field.
    """
    return params.field(pow(params.multiplicative_generator, 2, params.prime))


# --- Batch Inversion ---

def batch_inverse(values):
    """Invert every element of a galois array using a single field inversion.

    With running[i] = values[0] * ... * values[i-1], only running[n] is inverted;
    walking back, values[i]^-1 = running[i] * running[i+1]^-1 and
    running[i]^-1 = values[i] * running[i+1]^-1.

    Raises:
        ZeroDivisionError: If any element is zero
    """
    field_type = type(values)
    running = [field_type(1)]
    for v in values:
        running.append(running[-1] * v)

    inverses = field_type.Zeros(len(values))
    tail = running[-1] ** -1
    for i in reversed(range(len(values))):
        inverses[i] = running[i] * tail
        tail = tail * values[i]
    return inverses
