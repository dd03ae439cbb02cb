"""
Rewrite Trace Logger.

Records what a traversal did, step by step:
1. Phases (one per engine run).
2. Rule matches (rule N fired on node X).
3. Node rewrites (node X became node Y).

The output is a list of plain dictionaries suitable for JSON serialization.
A `TraceLogger` is mutable; give each concurrent traversal its own instance.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  RULE_MATCH = "rule_match"
  NODE_REWRITE = "node_rewrite"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Collects rewrite events.
  Passed to the traversal entry points via their ``tracer`` keyword.
  """

  def __init__(self) -> None:
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []

  @property
  def events(self) -> List[TraceEvent]:
    """Recorded events, oldest first."""
    return list(self._events)

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase. Returns the phase ID."""
    phase_id = str(uuid.uuid4())
    parent = self._active_phases[-1] if self._active_phases else None

    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self) -> None:
    """Ends the current active phase."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_match(self, rule_index: int, node_str: str) -> None:
    """Logs that the matcher of rule `rule_index` accepted a node."""
    self._log_simple(
      TraceEventType.RULE_MATCH,
      f"Rule {rule_index} matched '{node_str}'",
      {"rule": rule_index, "node": node_str},
    )

  def log_rewrite(self, before: str, after: str) -> None:
    """Logs a node replacement."""
    self._log_simple(TraceEventType.NODE_REWRITE, f"Rewrote '{before}'", {"before": before, "after": after})

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]) -> None:
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]
