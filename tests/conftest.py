"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from selectorkit import BuilderSettings, SelectorBuilder


@pytest.fixture
def builder():
    """Builder with default, permissive settings (ignores the environment)."""
    return SelectorBuilder(BuilderSettings(_env_file=None, combinator_policy="allow"))


@pytest.fixture
def strict_builder():
    """Builder that rejects unknown combinators."""
    return SelectorBuilder(BuilderSettings(_env_file=None, combinator_policy="error"))
