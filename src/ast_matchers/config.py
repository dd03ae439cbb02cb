"""
Runtime Configuration Store.

Settings for `RewriteEngine`, resolved from ``[tool.ast_matchers]`` in the
nearest ``pyproject.toml`` and overridden by explicit arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from ast_matchers.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RewriteConfig(BaseModel):
  """
  Configuration container for the rewrite engine.
  """

  trace: bool = Field(False, description="Record rule matches and rewrites in the result.")
  log_level: Optional[str] = Field(
    None, description="If set, install a Rich log handler at this level before running."
  )

  @field_validator("log_level")
  @classmethod
  def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
    """
    Normalizes the level name.

    Args:
        v (Optional[str]): Raw level name.

    Returns:
        Optional[str]: The upper-cased level name.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if v is None:
      return v
    v_clean = v.strip().upper()
    if v_clean not in _LEVELS:
      raise ValueError(f"Unknown log level: '{v}'. Supported levels: {list(_LEVELS)}")
    return v_clean

  @classmethod
  def load(
    cls,
    trace: Optional[bool] = None,
    log_level: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RewriteConfig":
    """
    Loads configuration from pyproject.toml and overrides with arguments.

    Args:
        trace (Optional[bool]): Override for trace recording.
        log_level (Optional[str]): Override for the log level.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RewriteConfig: The fully resolved configuration object.
    """
    toml_config = _load_toml_settings(search_path or Path.cwd())

    final_trace = trace if trace is not None else toml_config.get("trace", False)
    final_level = log_level or toml_config.get("log_level")

    return cls(trace=final_trace, log_level=final_level)


def _load_toml_settings(start_path: Path) -> Dict[str, Any]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts
  the ``[tool.ast_matchers]`` table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Dict[str, Any]: The table, or an empty dict when none is found.
  """
  toml_path = _find_pyproject(start_path.resolve())
  if toml_path is None:
    return {}

  try:
    with open(toml_path, "rb") as f:
      data = tomllib.load(f)
  except tomllib.TOMLDecodeError as e:
    log_warning(f"Ignoring unreadable {toml_path}: {e}")
    return {}

  return data.get("tool", {}).get("ast_matchers", {})


def _find_pyproject(current: Path) -> Optional[Path]:
  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      return toml_path
  return None
