import inspect
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import structlog

# ANSI colour for the level tag on console lines
LEVEL_TAGS = {
    "DEBUG": "\033[2;36mDEBUG\033[0m",
    "INFO": "\033[32mINFO\033[0m",
    "WARNING": "\033[1;33mWARNING\033[0m",
    "ERROR": "\033[1;31mERROR\033[0m",
    "CRITICAL": "\033[1;37;41mCRITICAL\033[0m",
}


def _sink_logger(name: str, level: int, handler: logging.Handler) -> logging.Logger:
    sink = logging.getLogger(name)
    sink.setLevel(level)
    sink.propagate = False
    if not any(type(h) is type(handler) for h in sink.handlers):
        handler.setFormatter(logging.Formatter("%(message)s"))
        sink.addHandler(handler)
    else:
        handler.close()
    return sink


class StructuredLogger:
    """Console + JSON-file logger built on structlog.

    Instances are cached by name, so building the same logger twice reuses
    the underlying handlers instead of stacking new ones. Every record is
    rendered to a single string by structlog before it reaches the stdlib
    handler, tracebacks included.
    """

    _logger_cache: Dict[str, "StructuredLogger"] = {}

    def __init__(
        self,
        name: str = "userservice",
        log_file: Optional[str] = "app.log",
        level: str = "INFO",
        context: Optional[dict] = None,
    ):
        self.name = name
        self.context = context or {}

        if name in self._logger_cache:
            cached = self._logger_cache[name]
            self.console_logger = cached.console_logger
            self.file_logger = cached.file_logger
            return

        log_level = getattr(logging, level.upper(), logging.INFO)

        # ----------------------------
        # Caller info processor
        # ----------------------------
        def add_caller(logger, method_name, event_dict):
            frame = inspect.currentframe()
            while frame:
                module_name = frame.f_globals.get("__name__")
                if (
                    module_name
                    and not module_name.startswith("structlog")
                    and not module_name.startswith("logging")
                    and not module_name.endswith("structured_logger")
                ):
                    event_dict["module"] = module_name
                    event_dict["function"] = frame.f_code.co_name
                    event_dict["lineno"] = frame.f_lineno
                    break
                frame = frame.f_back
            return event_dict

        # ----------------------------
        # Console renderer
        # ----------------------------
        def render_console(logger, method_name, event_dict):
            ts = event_dict.pop("timestamp", None) or datetime.now(timezone.utc).isoformat()
            level_name = event_dict.pop("level", method_name).upper()
            logger_name = event_dict.pop("logger", self.name)
            msg = event_dict.pop("event", "")
            module = event_dict.pop("module", "")
            func = event_dict.pop("function", "")
            lineno = event_dict.pop("lineno", "")
            traceback = event_dict.pop("exception", None)

            line = f"{ts} [{logger_name}] {LEVEL_TAGS.get(level_name, level_name)}: {msg}"
            fields = " ".join(f"{k}={v}" for k, v in event_dict.items())
            if fields:
                line += f" {fields}"
            # Caller info only for WARNING and above
            if level_name in ("WARNING", "ERROR", "CRITICAL") and module and func:
                line += f" ({module}.{func}:{lineno})"
            if traceback:
                line += f"\n{traceback}"
            return line

        console_sink = _sink_logger(f"{name}_console", log_level, logging.StreamHandler())
        self.console_logger = structlog.wrap_logger(
            console_sink,
            processors=[
                structlog.processors.TimeStamper(fmt="ISO", utc=True),
                structlog.stdlib.add_log_level,
                structlog.processors.format_exc_info,
                add_caller,
                render_console,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
        ).bind(logger=name, **self.context)

        # ----------------------------
        # File logger (JSON lines)
        # ----------------------------
        self.file_logger = None
        if log_file:
            file_sink = _sink_logger(
                f"{name}_file", log_level, logging.FileHandler(log_file, encoding="utf-8", delay=True)
            )
            self.file_logger = structlog.wrap_logger(
                file_sink,
                processors=[
                    structlog.processors.TimeStamper(fmt="ISO", utc=True),
                    structlog.stdlib.add_log_level,
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                    add_caller,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer(),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
            ).bind(logger=name, **self.context)

        self._logger_cache[name] = self

    def _emit(self, level_method: str, msg: str, /, **extra):
        for sink in (self.console_logger, self.file_logger):
            if sink is not None:
                getattr(sink, level_method)(msg, **extra)

    def debug(self, msg: str, /, **extra):
        self._emit("debug", msg, **extra)

    def info(self, msg: str, /, **extra):
        self._emit("info", msg, **extra)

    def warning(self, msg: str, /, **extra):
        self._emit("warning", msg, **extra)

    def error(self, msg: str, /, **extra):
        self._emit("error", msg, **extra)

    def critical(self, msg: str, /, **extra):
        self._emit("critical", msg, **extra)

    def exception(self, msg: str, /, **extra):
        # Logged at error level; the active exception is rendered by format_exc_info
        extra.setdefault("exc_info", True)
        self._emit("error", msg, **extra)
