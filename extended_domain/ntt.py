"""Radix-2 Number Theoretic Transform over a galois prime field.

These are the power-of-two building blocks both domain strategies share: the
in-place Cooley-Tukey transform and the closed-form Lagrange basis of a
power-of-two subgroup.
"""

import numpy as np

from extended_domain.field import batch_inverse

# --- Transform ---

def radix2_transform(values, root):
    """In-place Cooley-Tukey transform of a power-of-two length galois array.

    Evaluates the polynomial with coefficients `values` at root^0 .. root^(n-1).
    The transform is unnormalised: running it with root^-1 on the output yields
    n times the original coefficients.

    Args:
        values: galois FieldArray, length n a power of two (modified in place)
        root: Primitive n-th root of unity in the same field

    Returns:
        `values`, for chaining
    """
    n = len(values)
    assert n > 0 and (n & (n - 1)) == 0, "Transform length must be a power of 2"
    if n == 1:
        return values

    field_type = type(values)
    work = values[_bit_reverse_indices(n)]

    m = 2
    while m <= n:
        half = m // 2
        twiddles = powers(field_type, root ** (n // m), half)

        blocks = work.reshape(n // m, m)
        u = blocks[:, :half].copy()
        t = blocks[:, half:] * twiddles
        blocks[:, :half] = u + t
        blocks[:, half:] = u - t
        m *= 2

    values[:] = work
    return values


def radix2_inverse_transform(values, root):
    """In-place inverse of radix2_transform (normalised by n^-1)."""
    n = len(values)
    field_type = type(values)
    radix2_transform(values, root ** -1)
    values[:] = values * field_type(n % field_type.characteristic) ** -1
    return values


# --- Lagrange Basis ---

def radix2_lagrange_basis(n: int, t, omega):
    """Evaluate all n Lagrange basis polynomials of <omega> at t.

    With Z(t) = t^n - 1, L_i(t) = Z(t) * omega^i / (n * (t - omega^i)).
    When t is itself a subgroup element the result is one-hot.

    Args:
        n: Subgroup order (power of two)
        t: Evaluation point (galois scalar)
        omega: Primitive n-th root of unity

    Returns:
        galois FieldArray of length n
    """
    field_type = type(t)
    if n == 1:
        return field_type.Ones(1)

    points = powers(field_type, omega, n)
    z = t ** n - field_type(1)
    if z == 0:
        result = field_type.Zeros(n)
        result[np.nonzero(points == t)[0][0]] = 1
        return result

    scale = z * field_type(n % field_type.characteristic) ** -1
    return scale * points * batch_inverse(t - points)


# --- Helpers ---

def log2_pow2(size: int) -> int:
    """Exponent k of a power of two 2^k."""
    assert size > 0 and (size & (size - 1)) == 0, "Size must be a power of 2"
    return size.bit_length() - 1


def _bit_reverse_indices(n: int) -> np.ndarray:
    """Permutation sending i to its log2(n)-bit reversal."""
    log_n = log2_pow2(n)
    return np.array(
        [int('{:0{width}b}'.format(i, width=log_n)[::-1], 2) for i in range(n)],
        dtype=np.int64,
    )


def powers(field_type, omega, n_roots: int):
    """Powers of a field element: roots[k] = omega^k."""
    roots = field_type.Zeros(n_roots)
    roots[0] = field_type(1)
    for i in range(1, n_roots):
        roots[i] = roots[i - 1] * omega
    return roots
