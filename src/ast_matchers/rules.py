"""
Rule Application.

A `Rule` pairs a matcher with a transform. Rules are applied to a single node
here; walking the tree is the job of `ast_matchers.traversal`.

Rule sets are folded, not dispatched: every rule receives the output of the
rule before it, so several rules may fire on one position and their order
matters.
"""

import logging
from functools import reduce
from typing import Callable, NamedTuple, Optional, Sequence

from ast_matchers.matchers import Predicate
from ast_matchers.nodes import Node
from ast_matchers.printer import ast_to_string
from ast_matchers.tracer import TraceLogger

logger = logging.getLogger(__name__)

Transform = Callable[[Node], Node]


class Rule(NamedTuple):
  """
  A conditional rewrite: apply `transform` wherever `matcher` holds.
  """

  matcher: Predicate
  transform: Transform


def apply_if_matches(
  rule: Rule,
  node: Node,
  tracer: Optional[TraceLogger] = None,
  index: int = 0,
) -> Node:
  """
  Applies one rule to one node.

  Args:
      rule (Rule): The rule to try.
      node (Node): The node to test.
      tracer (TraceLogger, optional): Receives match and rewrite events.
      index (int): Position of the rule in its rule set, for trace labels.

  Returns:
      Node: ``rule.transform(node)`` if the matcher holds, else `node` itself.
  """
  if not rule.matcher(node):
    return node

  if tracer is not None:
    tracer.log_match(index, ast_to_string(node))

  result = rule.transform(node)

  if tracer is not None and result is not node:
    tracer.log_rewrite(ast_to_string(node), ast_to_string(result))

  if result is not node and logger.isEnabledFor(logging.DEBUG):
    logger.debug("Rule %d rewrote '%s' -> '%s'", index, ast_to_string(node), ast_to_string(result))

  return result


def apply_rule_set(
  rules: Sequence[Rule],
  node: Node,
  tracer: Optional[TraceLogger] = None,
) -> Node:
  """
  Folds a node through an ordered rule list.

  Each rule sees the previous rule's output, never the original node.

  Args:
      rules (Sequence[Rule]): Rules in application order.
      node (Node): Starting node.
      tracer (TraceLogger, optional): Receives match and rewrite events.

  Returns:
      Node: The node after every rule has been tried once.
  """
  return reduce(
    lambda acc, item: apply_if_matches(item[1], acc, tracer, item[0]),
    enumerate(rules),
    node,
  )
