"""
Central Logging and Console Utilities.

Routes the package's standard `logging` output through `rich`.

1.  **Logging Integration**: `configure_logging` installs a `RichHandler` on the
    root logger. Nothing is configured on import; the engine only calls it when
    a log level was requested.
2.  **Console Injection**: a Proxy around the Rich Console lets the output
    destination (stdout, file, in-memory buffer) be swapped at runtime via
    `set_console`, which is how tests capture rendered trees.

Attributes:
    console (_ConsoleProxy): A stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
  }
)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  Printing is forwarded to the current backend. When the backend changes and
  logging was configured through `configure_logging`, the Rich handler is
  re-created so log records follow the new destination.

  Attributes:
      _backend (Console): The active Rich Console instance.
      _level (Optional[int]): Level passed to the last `configure_logging` call.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._level: Optional[int] = None

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    if self._level is not None:
      self.configure_logging(self._level)

  def reset(self) -> None:
    """Resets the proxy to a fresh standard output console and removes its log handler."""
    self._backend = Console(theme=_THEME)
    if self._level is not None:
      _remove_rich_handlers()
      self._level = None

  @property
  def backend(self) -> Console:
    """The currently active Console."""
    return self._backend

  def configure_logging(self, level: int) -> None:
    """
    Directs the standard logging library to the current backend console.

    Args:
        level (int): Root logger level (e.g. ``logging.DEBUG``).
    """
    _remove_rich_handlers()

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(rich_handler)
    self._level = level

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


def _remove_rich_handlers() -> None:
  root_logger = logging.getLogger()
  for handler in list(root_logger.handlers):
    if isinstance(handler, RichHandler):
      root_logger.removeHandler(handler)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset the console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def configure_logging(level: str = "WARNING") -> None:
  """
  Installs a Rich logging handler at the given level.

  Args:
      level (str): Standard level name, e.g. 'DEBUG'.
  """
  console.configure_logging(logging.getLevelName(level.upper()))


def log_warning(msg: str) -> None:
  """Logs a warning message via standard logging."""
  logging.warning(msg)