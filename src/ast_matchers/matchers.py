"""
Node Predicate Combinators.

A predicate is any callable ``Node -> bool``. This module provides the algebra
used to compose them:

- `and_match` / `or_match`: short-circuiting conjunction and disjunction.
- `inverse_match`: negation.
- `ALWAYS`: the neutral filter, true for every node.
- `match_within`: lifts a predicate onto the immediate children of a node.

Plus a few builders for the arithmetic vocabulary (`has_val`, `has_value`,
`has_op`).

Example:

.. code-block:: python

    from ast_matchers.matchers import and_match, inverse_match, has_value
    from ast_matchers.nodes import is_num

    not_two = and_match(is_num, inverse_match(has_value(2)))
"""

from typing import Any, Callable

from ast_matchers.errors import UnsupportedNodeKindError
from ast_matchers.nodes import BinaryOp, Leaf, Node, is_bin_op, is_num

Predicate = Callable[[Node], bool]

_MISSING = object()


def and_match(p1: Predicate, p2: Predicate) -> Predicate:
  """
  Conjunction of two predicates.

  `p2` is only evaluated when `p1` holds.

  Args:
      p1 (Predicate): First predicate.
      p2 (Predicate): Second predicate, guarded by the first.

  Returns:
      Predicate: The combined predicate.
  """

  def predicate(node: Node) -> bool:
    return bool(p1(node)) and bool(p2(node))

  return predicate


def or_match(p1: Predicate, p2: Predicate) -> Predicate:
  """
  Disjunction of two predicates.

  `p2` is only evaluated when `p1` does not hold.

  Args:
      p1 (Predicate): First predicate.
      p2 (Predicate): Fallback predicate.

  Returns:
      Predicate: The combined predicate.
  """

  def predicate(node: Node) -> bool:
    return bool(p1(node)) or bool(p2(node))

  return predicate


def inverse_match(p: Predicate) -> Predicate:
  """Logical negation of `p`."""

  def predicate(node: Node) -> bool:
    return not p(node)

  return predicate


not_match = inverse_match


def ALWAYS(node: Node) -> bool:
  """Matches every node."""
  return True


def always() -> Predicate:
  """Returns the `ALWAYS` predicate."""
  return ALWAYS


def match_within(p: Predicate) -> Predicate:
  """
  Lifts `p` onto the direct children of a node.

  Only one level below the node is inspected; grandchildren are never visited.

  - BinaryOp: ``p(left) or p(right)``.
  - Leaf: always False.

  Args:
      p (Predicate): Predicate applied to each child.

  Returns:
      Predicate: Predicate over the parent node.

  Raises:
      UnsupportedNodeKindError: If the parent is neither a Leaf nor a BinaryOp.
  """

  def predicate(node: Node) -> bool:
    if isinstance(node, BinaryOp):
      return bool(p(node.left)) or bool(p(node.right))
    if isinstance(node, Leaf):
      return False
    raise UnsupportedNodeKindError(node, "match_within")

  return predicate


# --- Arithmetic Vocabulary ---


def has_val(value: Any) -> Predicate:
  """
  Matches any node whose ``value`` equals `value`.

  Booleans only match booleans, so ``has_val(1)`` rejects ``True``. Other
  numbers compare by value (``2 == 2.0``). Binary nodes carry no value and
  never match.
  """

  def predicate(node: Node) -> bool:
    v = getattr(node, "value", _MISSING)
    return isinstance(v, bool) == isinstance(value, bool) and v == value

  return predicate


def has_value(value: Any) -> Predicate:
  """Matches value nodes holding `value`."""
  return and_match(is_num, has_val(value))


def has_op(op: str) -> Predicate:
  """Matches binary nodes whose operator is `op`."""
  return and_match(is_bin_op, lambda node: node.op == op)
