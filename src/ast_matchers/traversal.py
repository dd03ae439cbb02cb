"""
Bottom-Up Traversal Engine.

Builds ``Node -> Node`` functions that rewrite a tree in a single post-order
pass.

Algorithm:
    1.  BinaryOp: rewrite ``left`` then ``right``.
    2.  If neither child changed (by identity) keep the original node,
        otherwise build a new BinaryOp around the rewritten children.
    3.  Apply the rule (or rule set) once to that node.
    4.  Leaf: apply the rule (or rule set) directly.
    5.  Anything else: raise `UnsupportedNodeKindError`.

Nodes produced by a transform are not offered to the rules again. Call the
traversal again on its own output to rewrite further.
"""

from functools import partial
from typing import Callable, Optional, Sequence

from ast_matchers.errors import UnsupportedNodeKindError
from ast_matchers.nodes import BinaryOp, Leaf, Node
from ast_matchers.rules import Rule, apply_if_matches, apply_rule_set
from ast_matchers.tracer import TraceLogger

NodeFn = Callable[[Node], Node]


def traverse_with(apply_at_node: NodeFn) -> NodeFn:
  """
  Shared post-order skeleton.

  Args:
      apply_at_node (Callable): Strategy invoked exactly once per tree
          position, after that position's children are final.

  Returns:
      Callable: ``Node -> Node`` rewriting a whole tree.
  """

  def walk(node: Node) -> Node:
    if isinstance(node, BinaryOp):
      new_left = walk(node.left)
      new_right = walk(node.right)
      if new_left is node.left and new_right is node.right:
        rebuilt = node
      else:
        rebuilt = BinaryOp(node.op, new_left, new_right)
      return apply_at_node(rebuilt)
    if isinstance(node, Leaf):
      return apply_at_node(node)
    raise UnsupportedNodeKindError(node, "traverse")

  return walk


def single_traverse(rule: Rule, tracer: Optional[TraceLogger] = None) -> NodeFn:
  """
  Traversal applying one rule at every position.

  Args:
      rule (Rule): The rule to apply.
      tracer (TraceLogger, optional): Receives match and rewrite events.

  Returns:
      Callable: ``Node -> Node``.
  """
  return traverse_with(partial(apply_if_matches, rule, tracer=tracer))


def traverse(rules: Sequence[Rule], tracer: Optional[TraceLogger] = None) -> NodeFn:
  """
  Traversal folding every position through an ordered rule set.

  The rule sequence is copied when the traversal is built; later changes to
  the caller's list do not affect it.

  Args:
      rules (Sequence[Rule]): Rules in application order.
      tracer (TraceLogger, optional): Receives match and rewrite events.

  Returns:
      Callable: ``Node -> Node``.
  """
  return traverse_with(partial(apply_rule_set, tuple(rules), tracer=tracer))
