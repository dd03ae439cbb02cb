"""
Rewrite Engine.

Thin orchestration layer over `ast_matchers.traversal`: picks the single-rule
or rule-set traversal, wires in tracing and logging according to a
`RewriteConfig`, and packages the outcome as a `RewriteResult`.

Exactly one bottom-up pass is run per call to `RewriteEngine.run`.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from ast_matchers.config import RewriteConfig
from ast_matchers.nodes import Node
from ast_matchers.rules import Rule
from ast_matchers.tracer import TraceLogger
from ast_matchers.traversal import single_traverse, traverse
from ast_matchers.utils.console import configure_logging

logger = logging.getLogger(__name__)


class RewriteResult(BaseModel):
  """
  Container for the outcome of a rewrite pass.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  tree: Any = Field(..., description="The rewritten tree.")
  changed: bool = Field(False, description="True if the root differs (by identity) from the input.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")


class RewriteEngine:
  """
  Applies a rule, or an ordered rule set, to trees.

  Attributes:
      rules (Union[Rule, tuple]): A single rule, or the rule set as a tuple.
      config (RewriteConfig): Active settings.
  """

  def __init__(self, rules: Union[Rule, Sequence[Rule]], config: Optional[RewriteConfig] = None) -> None:
    """
    Args:
        rules: One `Rule`, or a sequence of rules applied in order.
        config: Engine settings. Defaults to `RewriteConfig()`.
    """
    self.rules = rules if isinstance(rules, Rule) else tuple(rules)
    self.config = config or RewriteConfig()

    if self.config.log_level:
      configure_logging(self.config.log_level)

  def run(self, tree: Node) -> RewriteResult:
    """
    Runs one bottom-up pass over `tree`.

    Args:
        tree (Node): The input tree. It is not modified.

    Returns:
        RewriteResult: The rewritten tree and, if enabled, the trace.

    Raises:
        UnsupportedNodeKindError: If the tree contains an unknown node kind.
    """
    tracer = TraceLogger() if self.config.trace else None
    if tracer is not None:
      tracer.start_phase("Rewrite", f"{self._rule_count()} rule(s)")

    if isinstance(self.rules, Rule):
      rewritten = single_traverse(self.rules, tracer=tracer)(tree)
    else:
      rewritten = traverse(self.rules, tracer=tracer)(tree)

    if tracer is not None:
      tracer.end_phase()

    changed = rewritten is not tree
    logger.info("Rewrite pass finished (%d rule(s), changed=%s)", self._rule_count(), changed)

    return RewriteResult(
      tree=rewritten,
      changed=changed,
      trace_events=tracer.export() if tracer else [],
    )

  def _rule_count(self) -> int:
    return 1 if isinstance(self.rules, Rule) else len(self.rules)
