"""Pytest configuration for extended_domain tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from extended_domain.field import FieldParams  # noqa: E402


@pytest.fixture(scope="session")
def field_params():
    """Factory returning a cached FieldParams for a prime."""
    cache = {}

    def get(prime: int) -> FieldParams:
        if prime not in cache:
            cache[prime] = FieldParams.from_prime(prime)
        return cache[prime]

    return get
