"""
End-to-end rewrite scenarios on ``(1 + 2) * 3``.
"""

import pytest

from ast_matchers.matchers import ALWAYS, and_match, has_op, has_val, has_value, inverse_match, match_within, or_match
from ast_matchers.nodes import BinaryOp, Leaf, bin_op, is_bin_op, is_num, mul, num, sub
from ast_matchers.printer import ast_to_string
from ast_matchers.rules import Rule
from ast_matchers.traversal import single_traverse, traverse


class TestSinglePredicate:
  def test_match_values(self, ast):
    rule = Rule(is_num, lambda node: num(node.value * 2))
    assert ast_to_string(single_traverse(rule)(ast)) == "2 + 4 * 6"

  def test_match_binary_ops(self, ast):
    rule = Rule(is_bin_op, lambda node: sub(node.left, node.right))
    assert ast_to_string(single_traverse(rule)(ast)) == "1 - 2 - 3"


class TestCompoundPredicates:
  def test_match_specific_value(self, ast):
    rule = Rule(has_value(2), lambda node: num(node.value + 1))
    assert ast_to_string(single_traverse(rule)(ast)) == "1 + 3 * 3"

  def test_match_specific_op(self, ast):
    rule = Rule(has_op("+"), lambda node: mul(node.left, node.right))
    assert ast_to_string(single_traverse(rule)(ast)) == "1 * 2 * 3"

  def test_inverse_match(self, ast):
    not_two = and_match(is_num, inverse_match(has_value(2)))
    rule = Rule(not_two, lambda node: num(node.value + 1))
    assert ast_to_string(single_traverse(rule)(ast)) == "2 + 2 * 4"

  def test_alternative_predicates(self, ast):
    two_or_three = and_match(is_num, or_match(has_val(2), has_val(3)))
    rule = Rule(two_or_three, lambda node: num(node.value + 1))
    assert ast_to_string(single_traverse(rule)(ast)) == "1 + 3 * 4"


def test_match_every_node(ast):
  def swap_or_negate(node):
    if isinstance(node, BinaryOp):
      return bin_op(node.op)(node.right, node.left)
    return num(-node.value)

  result = single_traverse(Rule(ALWAYS, swap_or_negate))(ast)
  assert ast_to_string(result) == "-3 * -2 + -1"


@pytest.mark.parametrize(
  "transform, expected",
  [
    (lambda node: node.left, "1"),
    (lambda node: node.right, "3"),
  ],
)
def test_remove_parts_after_match(ast, transform, expected):
  result = single_traverse(Rule(is_bin_op, transform))(ast)
  assert ast_to_string(result) == expected


def test_match_direct_child(ast):
  bin_op_with_two = and_match(is_bin_op, match_within(has_value(2)))
  rule = Rule(bin_op_with_two, lambda node: num(node.left.value * 4))
  result = single_traverse(rule)(ast)
  assert ast_to_string(result) == "4 * 3"
  assert isinstance(result.left, Leaf)


def test_multiple_rules_in_one_traversal(ast):
  rules = [
    Rule(has_value(2), lambda node: num(node.value + 1)),
    Rule(has_value(3), lambda node: num(node.value - 4)),
  ]
  assert ast_to_string(traverse(rules)(ast)) == "1 + -1 * -1"


def test_multiple_rules_reversed_order(ast):
  rules = [
    Rule(has_value(3), lambda node: num(node.value - 4)),
    Rule(has_value(2), lambda node: num(node.value + 1)),
  ]
  assert ast_to_string(traverse(rules)(ast)) == "1 + 3 * -1"
