"""Fake implementations of core ports for testing.

- FakeTestDescription: Minimal TestDescription with configurable fields
- FakeSuiteNode: Parent suite exposing a fixed description
"""

from .description import FakeTestDescription
from .suite import FakeSuiteNode

__all__ = [
    "FakeSuiteNode",
    "FakeTestDescription",
]
