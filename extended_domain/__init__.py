"""Extended domain - finite-field evaluation domains for fast polynomial transforms."""

from extended_domain.basic_radix2 import BasicRadix2Domain
from extended_domain.domain import EvaluationDomain
from extended_domain.errors import (
    DivisionByZeroError,
    DomainError,
    InconsistentTwoAdicityError,
    IndexOutOfRangeError,
    InvalidShiftError,
    InvalidSizeError,
    NoRootOfUnityError,
    SingularCosetError,
    SizeMismatchError,
)
from extended_domain.extended_radix2 import ExtendedRadix2Domain
from extended_domain.field import (
    GOLDILOCKS,
    GOLDILOCKS_PRIME,
    FieldParams,
    batch_inverse,
    coset_shift,
    primitive_root_of_order,
)
from extended_domain.ntt import radix2_inverse_transform, radix2_lagrange_basis, radix2_transform
from extended_domain.polynomial import (
    evaluate,
    lagrange_interpolate,
    to_coefficients,
    to_evaluations,
)

__all__ = [
    # Domains
    "EvaluationDomain",
    "BasicRadix2Domain",
    "ExtendedRadix2Domain",
    # Field
    "FieldParams",
    "GOLDILOCKS",
    "GOLDILOCKS_PRIME",
    "primitive_root_of_order",
    "coset_shift",
    "batch_inverse",
    # NTT
    "radix2_transform",
    "radix2_inverse_transform",
    "radix2_lagrange_basis",
    # Polynomial
    "evaluate",
    "to_evaluations",
    "to_coefficients",
    "lagrange_interpolate",
    # Errors
    "DomainError",
    "InvalidSizeError",
    "InvalidShiftError",
    "InconsistentTwoAdicityError",
    "NoRootOfUnityError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "DivisionByZeroError",
    "SingularCosetError",
]
