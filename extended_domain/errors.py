"""Exceptions raised by evaluation domains.

Every error is a contract violation by the caller (or by the field parameters
handed to a domain), never a transient condition. Each class also derives from
the builtin exception of the same category so callers may catch either.
"""


class DomainError(Exception):
    """Base class for all evaluation-domain errors."""


class InvalidSizeError(DomainError, ValueError):
    """Requested domain size cannot be built (m <= 1, or not a power of two)."""


class InconsistentTwoAdicityError(DomainError, ValueError):
    """Field two-adicity does not support a domain of the requested size."""


class NoRootOfUnityError(DomainError, ValueError):
    """Field has no primitive root of unity of the requested order."""


class SizeMismatchError(DomainError, ValueError):
    """Buffer is longer than the domain (or too short for a resize-free call)."""


class IndexOutOfRangeError(DomainError, IndexError):
    """Domain element lookup past the end of the domain."""


class DivisionByZeroError(DomainError, ZeroDivisionError):
    """A denominator derived from the domain parameters is zero."""


class SingularCosetError(DivisionByZeroError):
    """shift^small_m == 1, so the coset collapses onto the subgroup."""


class InvalidShiftError(DomainError, ValueError):
    """Coset shift is zero, so shift * H is not a coset of the subgroup."""
