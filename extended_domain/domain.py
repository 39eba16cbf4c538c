"""Evaluation domain capability interface.

An EvaluationDomain is a fixed set of m field points together with fast
transforms between coefficient and evaluation form over those points. Each
strategy (BasicRadix2Domain, ExtendedRadix2Domain) implements the interface
independently; which strategy to build for a given size is the caller's choice.

Buffers handed to the transforms are caller-owned. Python lists are rewritten
(and zero-padded) in place. galois arrays of length m are rewritten in place;
a shorter array cannot grow, so the padded result is returned instead. Every
mutating operation returns the buffer holding the result.
"""

from abc import ABC, abstractmethod

import numpy as np

from extended_domain.errors import SizeMismatchError
from extended_domain.field import FieldParams


class EvaluationDomain(ABC):
    """Uniform interface over power-of-two style evaluation domains."""

    def __init__(self, m: int, params: FieldParams) -> None:
        self._m = m
        self._params = params

    @property
    def m(self) -> int:
        """Number of evaluation points."""
        return self._m

    @property
    def field(self):
        """galois FieldArray class the domain computes in."""
        return self._params.field

    # --- Capability ---

    @abstractmethod
    def forward_transform(self, buffer):
        """Coefficients (degree < m) -> evaluations over the domain, in place."""
        pass

    @abstractmethod
    def inverse_transform(self, buffer):
        """Evaluations over the domain -> coefficients, in place."""
        pass

    @abstractmethod
    def lagrange_basis_at(self, t):
        """Values of all m Lagrange basis polynomials of the domain at t."""
        pass

    @abstractmethod
    def domain_element(self, index: int):
        """The index-th evaluation point."""
        pass

    @abstractmethod
    def vanishing_polynomial_at(self, t):
        """Z(t) for the monic degree-m polynomial vanishing on the domain."""
        pass

    @abstractmethod
    def accumulate_vanishing_polynomial(self, coeff, into) -> None:
        """Add coeff * Z(x) into the coefficient buffer `into` (len >= m + 1)."""
        pass

    @abstractmethod
    def divide_by_vanishing_on_coset(self, buffer):
        """Divide evaluations on the g-shifted domain by Z at the same points."""
        pass

    def elements(self):
        """All m evaluation points, in transform order."""
        return self.field([int(self.domain_element(i)) for i in range(self._m)])

    # --- Buffer Plumbing ---

    def _load(self, buffer, exact: bool = False):
        """Validate a caller buffer and return a zero-padded working copy.

        Raises before the caller's buffer is touched.
        """
        n = len(buffer)
        if n > self._m or (exact and n != self._m):
            raise SizeMismatchError(f"Expected buffer of length <= {self._m}, got {n}")
        values = self.field.Zeros(self._m)
        if n:
            values[:n] = self.field([int(x) % self._params.prime for x in buffer])
        return values

    def _store(self, buffer, values):
        """Write a length-m result back into the caller's buffer."""
        if isinstance(buffer, np.ndarray):
            if len(buffer) != self._m:
                return values
            buffer[:] = values
            return buffer
        buffer[:] = list(values)
        return buffer
