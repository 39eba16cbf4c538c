"""Polynomial helpers layered on top of evaluation domains.

Coefficients are in ascending order [a0, a1, ..., a_{n-1}] throughout.
"""

from typing import Optional, Sequence

import galois

from extended_domain.domain import EvaluationDomain
from extended_domain.field import FieldParams, batch_inverse


def evaluate(coefficients, x, params: Optional[FieldParams] = None):
    """Evaluate a coefficient sequence at x using Horner's method.

    x must be a galois scalar unless `params` is given, in which case ints are
    coerced into that field.
    """
    if params is not None:
        x = params.element(x)
    elif not isinstance(x, galois.FieldArray):
        raise TypeError(f"Expected a galois field element, got {type(x).__name__}; pass params to coerce ints")
    field_type = type(x)
    result = field_type(0)
    for c in reversed(list(coefficients)):
        result = result * x + field_type(int(c) % field_type.characteristic)
    return result


def to_evaluations(coefficients, domain: EvaluationDomain):
    """Convert a polynomial from coefficient form to evaluations over `domain`.

    The input is left untouched; a new galois array of length domain.m is returned.
    """
    buffer = list(coefficients)
    domain.forward_transform(buffer)
    return domain.field([int(v) for v in buffer])


def to_coefficients(evaluations, domain: EvaluationDomain):
    """Convert evaluations over `domain` back to coefficient form (non-mutating)."""
    buffer = list(evaluations)
    domain.inverse_transform(buffer)
    return domain.field([int(v) for v in buffer])


def lagrange_interpolate(xs: Sequence, ys: Sequence, params: FieldParams):
    """Coefficients of the unique polynomial of degree < n through n points.

    Builds M(x) = prod_j (x - x_j) once, then for each i recovers
    M(x) / (x - x_i) by synthetic division and weights it by
    y_i / prod_{j != i} (x_i - x_j).

    Args:
        xs: Pairwise-distinct abscissae
        ys: Values at xs
        params: Field the points live in

    Returns:
        galois FieldArray of n coefficients

    Raises:
        ValueError: If lengths differ or xs repeats a value
    """
    if len(xs) != len(ys):
        raise ValueError(f"Dimension mismatch: {len(xs)} vs {len(ys)}")

    field_type = params.field
    n = len(xs)
    if n == 0:
        return field_type.Zeros(0)

    xs = field_type([int(x) % params.prime for x in xs])
    ys = field_type([int(y) % params.prime for y in ys])
    if len(set(int(x) for x in xs)) != n:
        raise ValueError("Interpolation points must have distinct x-coordinates")

    master = field_type.Zeros(n + 1)
    master[0] = 1
    for xj in xs:
        shifted = field_type.Zeros(n + 1)
        shifted[1:] = master[:-1]
        master = shifted - xj * master

    quotients = []
    for xi in xs:
        q = field_type.Zeros(n)
        carry = params.zero()
        for k in range(n, 0, -1):
            carry = master[k] + carry * xi
            q[k - 1] = carry
        quotients.append(q)

    denominators = field_type([int(evaluate(q, xi)) for q, xi in zip(quotients, xs)])
    weights = ys * batch_inverse(denominators)

    result = field_type.Zeros(n)
    for q, w in zip(quotients, weights):
        result = result + q * w
    return result
