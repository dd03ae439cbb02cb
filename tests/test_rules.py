"""
Tests for single-rule application and rule-set folding.
"""

import pytest

from ast_matchers.matchers import ALWAYS, has_value, inverse_match
from ast_matchers.nodes import is_num, num, plus
from ast_matchers.rules import Rule, apply_if_matches, apply_rule_set
from ast_matchers.tracer import TraceEventType, TraceLogger


def inc(node):
  return num(node.value + 1)


def double(node):
  return num(node.value * 2)


def test_rule_fields():
  rule = Rule(matcher=is_num, transform=inc)
  assert rule.matcher is is_num
  assert rule.transform is inc
  assert Rule(is_num, inc) == rule


def test_apply_if_matches_transforms():
  assert apply_if_matches(Rule(is_num, inc), num(1)) == num(2)


def test_apply_if_matches_passthrough_is_same_reference(exploding):
  node = num(1)
  assert apply_if_matches(Rule(inverse_match(ALWAYS), exploding), node) is node


def test_rule_set_chains_outputs():
  # 2 -> 3 by the first rule, then 3 matches the second rule.
  rules = [Rule(has_value(2), inc), Rule(has_value(3), double)]
  assert apply_rule_set(rules, num(2)) == num(6)


def test_rule_set_is_not_first_match_wins():
  rules = [Rule(is_num, inc), Rule(is_num, inc), Rule(is_num, inc)]
  assert apply_rule_set(rules, num(0)) == num(3)


def test_rule_order_changes_result():
  r1 = Rule(is_num, inc)
  r2 = Rule(is_num, double)
  node = num(5)
  assert apply_rule_set([r1, r2], node) == num(12)
  assert apply_rule_set([r2, r1], node) == num(11)


def test_empty_rule_set_is_identity():
  node = plus(num(1), num(2))
  assert apply_rule_set([], node) is node


def test_caller_errors_propagate_unchanged():
  class Boom(Exception):
    pass

  def explode(node):
    raise Boom("transform failed")

  with pytest.raises(Boom, match="transform failed"):
    apply_rule_set([Rule(is_num, explode)], num(1))


def test_tracer_records_match_and_rewrite():
  tracer = TraceLogger()
  rules = [Rule(has_value(9), inc), Rule(is_num, double)]
  apply_rule_set(rules, num(4), tracer=tracer)

  kinds = [e.type for e in tracer.events]
  assert kinds == [TraceEventType.RULE_MATCH, TraceEventType.NODE_REWRITE]
  assert tracer.events[0].metadata == {"rule": 1, "node": "4"}
  assert tracer.events[1].metadata == {"before": "4", "after": "8"}


def test_tracer_skips_rewrite_for_identity_transform():
  tracer = TraceLogger()
  apply_if_matches(Rule(ALWAYS, lambda n: n), num(1), tracer=tracer)
  assert [e.type for e in tracer.events] == [TraceEventType.RULE_MATCH]
