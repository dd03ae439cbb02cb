"""
Infix stringifier for expression trees.

Renders without parentheses, so ``(1 + 2) * 3`` prints as ``1 + 2 * 3``.
Used to inspect traversal results and to label trace events.
"""

from ast_matchers.errors import UnsupportedNodeKindError
from ast_matchers.nodes import BinaryOp, Leaf, Node


def ast_to_string(node: Node) -> str:
  """
  Renders a node as flat infix text.

  Args:
      node (Node): Root of the tree to render.

  Returns:
      str: e.g. ``"2 + 4 * 6"``.

  Raises:
      UnsupportedNodeKindError: If the tree contains an unknown node kind.
  """
  if isinstance(node, BinaryOp):
    return f"{ast_to_string(node.left)} {node.op} {ast_to_string(node.right)}"
  if isinstance(node, Leaf):
    return str(node.value)
  raise UnsupportedNodeKindError(node, "ast_to_string")
