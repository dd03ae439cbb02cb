"""
ast-matchers Package.

A single-pass, bottom-up rewriting engine for immutable expression trees.
Rules pair a node predicate with a transform; predicates are composed from a
small combinator algebra.

Usage
-----

Building and Rewriting a Tree
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ast_matchers import Rule, single_traverse, ast_to_string
    from ast_matchers.nodes import num, plus, mul, is_num

    tree = mul(plus(num(1), num(2)), num(3))
    double = Rule(is_num, lambda n: num(n.value * 2))
    print(ast_to_string(single_traverse(double)(tree)))
    # 2 + 4 * 6

Engine with Tracing
^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ast_matchers import RewriteEngine, RewriteConfig

    engine = RewriteEngine([double], config=RewriteConfig(trace=True))
    res = engine.run(tree)
    print(res.changed, len(res.trace_events))
"""

from typing import Sequence, Union

from ast_matchers.config import RewriteConfig
from ast_matchers.engine import RewriteEngine, RewriteResult
from ast_matchers.errors import UnsupportedNodeKindError
from ast_matchers.matchers import ALWAYS, always, and_match, inverse_match, match_within, not_match, or_match
from ast_matchers.nodes import BinaryOp, Leaf, Node
from ast_matchers.printer import ast_to_string
from ast_matchers.rules import Rule, apply_if_matches, apply_rule_set
from ast_matchers.traversal import single_traverse, traverse, traverse_with

__version__ = "0.0.1"


def rewrite(tree: Node, rules: Union[Rule, Sequence[Rule]]) -> Node:
  """
  Rewrites `tree` with one bottom-up pass.

  Convenience wrapper around `RewriteEngine` for callers that only want the
  resulting tree.

  Args:
      tree (Node): The input tree.
      rules: A single `Rule` or an ordered sequence of rules.

  Returns:
      Node: The rewritten tree.
  """
  engine = RewriteEngine(rules)
  return engine.run(tree).tree


__all__ = [
  "ALWAYS",
  "BinaryOp",
  "Leaf",
  "Node",
  "RewriteConfig",
  "RewriteEngine",
  "RewriteResult",
  "Rule",
  "UnsupportedNodeKindError",
  "always",
  "and_match",
  "apply_if_matches",
  "apply_rule_set",
  "ast_to_string",
  "inverse_match",
  "match_within",
  "not_match",
  "or_match",
  "rewrite",
  "single_traverse",
  "traverse",
  "traverse_with",
  "__version__",
]
