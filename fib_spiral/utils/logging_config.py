"""Logging configuration shared by the CLI and library callers.

Provides:
    - Console handler (stderr) and optional file handler
    - Human-readable or JSON-lines output
    - Contextual fields (e.g. steps=50) attached to every record
    - Python warnings routed into logging, so a
      ``StepCountClampedWarning`` shows up next to the run's other messages

Public API:
    setup_logging(log_level="INFO", log_file=None, json=False, context={"app": "cli"})
    get_logger(name)
    push_context(steps=50)
    pop_context(keys=["steps"])

Format examples:
    Human: 2026-10-19T09:12:03.120Z | INFO     | steps=50 | Assembled spiral: ...
    JSON:  {"t": "2026-10-19T09:12:03.120000+00:00", "lvl": "INFO", "steps": 50, "msg": "..."}

Idempotent: calling setup_logging() again replaces the handlers it
installed previously instead of stacking new ones.
"""

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


_context_var: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    'fib_spiral_logging_context', default={}
)

# Handlers installed by setup_logging(), removed on the next call
_installed_handlers: List[logging.Handler] = []


class ContextFormatter(logging.Formatter):
    """Formatter that appends contextual fields.

    Parameters
    ----------
    fmt_mode : str
        "human" or "json"
    use_color : bool
        ANSI-colour the level name (only when stderr is a TTY)
    """

    _COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    _RESET = '\033[0m'

    def __init__(self, fmt_mode: str = "human", use_color: bool = True):
        super().__init__()
        if fmt_mode not in ("human", "json"):
            raise ValueError(f"Unknown format mode: {fmt_mode}. Use 'human' or 'json'.")
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        context = _context_var.get()
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if self.fmt_mode == "json":
            return self._format_json(record, ts, context)
        return self._format_human(record, ts, context)

    def _format_json(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: Dict[str, Any]
    ) -> str:
        entry: Dict[str, Any] = {
            't': ts.isoformat(),
            'lvl': record.levelname,
            'name': record.name,
            'msg': record.getMessage(),
        }
        entry.update(context)
        if record.exc_info:
            entry['exc'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)

    def _format_human(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: Dict[str, Any]
    ) -> str:
        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{self._COLORS.get(record.levelname, '')}{level}{self._RESET}"

        parts = [ts_str, '|', level, '|']
        if context:
            parts.append(' '.join(f"{k}={v}" for k, v in context.items()))
            parts.append('|')
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    capture_warnings: bool = True,
    context: Optional[Dict[str, Any]] = None
) -> List[logging.Handler]:
    """Configure the root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        File to log to in addition to stderr; parent dirs are created
    json : bool
        JSON-lines output for the file handler, default False
    color : bool
        ANSI colours on the console, default True
    to_stderr : bool
        Attach a console handler, default True
    capture_warnings : bool
        Route ``warnings.warn`` through the ``py.warnings`` logger
    context : dict, optional
        Initial contextual fields

    Returns
    -------
    list[logging.Handler]
        Handlers installed by this call.

    Raises
    ------
    ValueError
        If *log_level* is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root.setLevel(level)

    if to_stderr:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ContextFormatter("human", use_color=color))
        _installed_handlers.append(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(
            ContextFormatter("json" if json else "human", use_color=False)
        )
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root.addHandler(handler)

    if context:
        push_context(**context)

    logging.captureWarnings(capture_warnings)

    return list(_installed_handlers)


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``."""
    return logging.getLogger(name)


def push_context(**kwargs: Any) -> None:
    """Add contextual fields to all subsequent records.

    Examples
    --------
    >>> push_context(app="cli")
    >>> push_context(steps=50)   # → "... | app=cli steps=50 | ..."
    """
    _context_var.set({**_context_var.get(), **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove contextual fields; ``None`` clears everything."""
    if keys is None:
        _context_var.set({})
        return
    current = dict(_context_var.get())
    for key in keys:
        current.pop(key, None)
    _context_var.set(current)
