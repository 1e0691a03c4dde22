"""
debug_trace.py

Trace output for export, import and rendering.

Lines look like ``[HH:MM:SS.mmm] [CATEGORY] message`` and go to stderr
and, when a log file is configured, are appended to it. Tracing is off
until configure() turns it on (the [debug] section of settings.toml).
"""

import sys
import time
import traceback
from datetime import datetime
from functools import wraps

DEBUG_TRACE = False

# Per-word RENDER lines are only written when this is also on
TRACE_RENDER = False

# Path of the log file, or None for stderr only
LOG_FILE = None

_VERBOSE_CATEGORIES = {"RENDER"}

_log_file = None


def configure(enabled: bool, trace_render: bool = False, log_file=None):
    """Switch tracing on or off and select the log file."""
    global DEBUG_TRACE, TRACE_RENDER, LOG_FILE
    close_log()
    DEBUG_TRACE = enabled
    TRACE_RENDER = trace_render
    LOG_FILE = log_file


def _enabled_for(category: str) -> bool:
    if not DEBUG_TRACE:
        return False
    return TRACE_RENDER or category not in _VERBOSE_CATEGORIES


def _open_log():
    global _log_file
    if _log_file is not None or not LOG_FILE:
        return _log_file
    try:
        _log_file = open(LOG_FILE, "a", encoding="utf-8")
    except OSError as e:
        print(f"[trace] cannot open {LOG_FILE}: {e}", file=sys.stderr, flush=True)
    return _log_file


def trace(msg: str, category: str = "INFO"):
    """Write one trace line for *category*."""
    if not _enabled_for(category):
        return
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    line = f"[{stamp}] [{category}] {msg}"
    print(line, file=sys.stderr, flush=True)
    log = _open_log()
    if log is not None:
        log.write(f"{line}\n")
        log.flush()


def trace_exception(msg: str = "Exception"):
    """Trace the exception currently being handled, with its traceback."""
    if DEBUG_TRACE:
        trace(f"{msg}: {traceback.format_exc()}", "ERROR")


def trace_call(category: str = "CALL"):
    """Decorator tracing entry, exit with elapsed time, and raised errors.

    The switch is read on every call, so functions decorated at import
    time follow a later configure().
    """
    def decorator(func):
        name = func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            if not _enabled_for(category):
                return func(*args, **kwargs)
            trace(f"enter {name}", category)
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                trace(f"{name} failed with {type(e).__name__}: {e}", "ERROR")
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            trace(f"leave {name} ({elapsed_ms:.1f} ms)", category)
            return result
        return wrapper
    return decorator


def close_log():
    """Flush and close the log file; the next trace line reopens it."""
    global _log_file
    log, _log_file = _log_file, None
    if log is not None:
        log.close()
