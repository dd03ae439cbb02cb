"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- The reference tree ``(1 + 2) * 3`` used across the suite.
- Console isolation so tests capturing output do not leak into each other.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'ast_matchers' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ast_matchers.nodes import mul, num, plus
from ast_matchers.utils.console import reset_console


@pytest.fixture
def ast():
  """The tree ``(1 + 2) * 3``."""
  return mul(plus(num(1), num(2)), num(3))


@pytest.fixture
def exploding():
  """A predicate or transform that must never be invoked."""

  def fail(node):
    raise AssertionError(f"should not have been called with {node!r}")

  return fail


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures the console proxy and root log level are restored after every test."""
  root_level = logging.getLogger().level
  yield
  reset_console()
  logging.getLogger().setLevel(root_level)
