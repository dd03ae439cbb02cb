"""
Tree Visualization Utility.

Renders an expression tree as a `rich.tree.Tree`, one line per node, so the
shape hidden by the flat infix printer can be inspected before and after a
rewrite.
"""

from typing import Optional

from rich.markup import escape
from rich.tree import Tree

from ast_matchers.errors import UnsupportedNodeKindError
from ast_matchers.nodes import BinaryOp, Leaf, Node
from ast_matchers.utils.console import console


def _label(node: Node) -> str:
  if isinstance(node, BinaryOp):
    return f"[bold magenta]BinaryOp[/bold magenta] {escape(str(node.op))}"
  if isinstance(node, Leaf):
    return f"[green]Leaf[/green] {escape(repr(node.value))}"
  raise UnsupportedNodeKindError(node, "build_rich_tree")


def build_rich_tree(node: Node, parent: Optional[Tree] = None) -> Tree:
  """
  Builds a Rich tree mirroring the node hierarchy.

  Args:
      node (Node): Root to render.
      parent (Tree, optional): Branch to attach to. A new root is created when omitted.

  Returns:
      Tree: The branch created for `node`.

  Raises:
      UnsupportedNodeKindError: If the tree contains an unknown node kind.
  """
  label = _label(node)
  branch = parent.add(label) if parent is not None else Tree(label)
  if isinstance(node, BinaryOp):
    build_rich_tree(node.left, branch)
    build_rich_tree(node.right, branch)
  return branch


def print_tree(node: Node) -> None:
  """Prints `node` to the active console."""
  console.print(build_rich_tree(node))
