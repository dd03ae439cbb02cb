"""
Expression Tree Model.

Defines the two node kinds the rewriting engine understands and the small
construction vocabulary used to build arithmetic trees by hand.

Nodes are frozen dataclasses. A rewrite never mutates a node; it builds a new
one and reuses untouched subtrees by reference, so ``is`` can be used to tell
whether a subtree was rewritten.

Usage
-----

.. code-block:: python

    from ast_matchers.nodes import num, plus, mul

    tree = mul(plus(num(1), num(2)), num(3))  # (1 + 2) * 3
"""

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Leaf:
  """
  A value node holding a single scalar.
  """

  value: Any
  """The scalar payload (e.g. ``2``)."""


@dataclass(frozen=True)
class BinaryOp:
  """
  A binary operation with an opaque operator tag and two children.
  """

  op: str
  """Operator symbol (e.g. '+', '*', '-')."""

  left: "Node"
  """Left operand."""

  right: "Node"
  """Right operand."""


Node = Union[Leaf, BinaryOp]


def num(value: Any) -> Leaf:
  """Builds a value node."""
  return Leaf(value)


def bin_op(op: str) -> Callable[[Node, Node], BinaryOp]:
  """
  Returns a constructor for binary nodes carrying the given operator.

  Args:
      op (str): The operator tag.

  Returns:
      Callable: ``(left, right) -> BinaryOp``.
  """

  def build(left: Node, right: Node) -> BinaryOp:
    return BinaryOp(op, left, right)

  return build


plus = bin_op("+")
mul = bin_op("*")
sub = bin_op("-")


def is_num(node: Node) -> bool:
  """True for value nodes."""
  return isinstance(node, Leaf)


def is_bin_op(node: Node) -> bool:
  """True for binary operation nodes."""
  return isinstance(node, BinaryOp)
