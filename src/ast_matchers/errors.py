"""
Error types raised by the rewriting engine.

The tree model is a closed set of node kinds. Any consumer that dispatches on
the node kind (traversal, shallow-child matching, printing) raises
`UnsupportedNodeKindError` when it meets something outside that set instead of
quietly treating it as a leaf or a non-match.
"""

from typing import Any


class UnsupportedNodeKindError(TypeError):
  """
  Raised when a value that is neither a `Leaf` nor a `BinaryOp` reaches a
  node-kind dispatch site.

  Attributes:
      node (Any): The offending object.
      kind (type): The type of the offending object.
  """

  def __init__(self, node: Any, context: str = "") -> None:
    """
    Args:
        node: The object that failed kind dispatch.
        context: Name of the operation that rejected it (e.g. 'traverse').
    """
    self.node = node
    self.kind = type(node)
    where = f" in {context}" if context else ""
    super().__init__(f"Unsupported node kind{where}: {self.kind.__name__}")
