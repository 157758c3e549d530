"""Telemetry services built on the standard ``logging`` package.

This module exposes a narrow surface area for the rest of the editor:

``configure(...)`` -- override or preset the logging configuration
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager timing a block of work
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional

ENV_PREFIX = "TEDIT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "tedit")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")

_LOGGER_CACHE: MutableMapping[str, logging.Logger] = {}
_ACTIVE_CONFIG: Optional["TelemetryConfig"] = None
_HANDLERS: list[logging.Handler] = []


@dataclass(slots=True)
class TelemetryConfig:
    """Settings applied to the root ``tedit`` logger."""

    min_level: str = "INFO"
    console: bool = True
    json_format: bool = False
    file_path: str = ""


class JsonLineFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields = getattr(record, "fields", None)
        if fields:
            payload.update(fields)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


def _resolve_level() -> str:
    return (_env("LOG_LEVEL") or "INFO").upper()


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()

    if key == "development":
        return TelemetryConfig(min_level="DEBUG", console=True)
    if key == "production":
        log_path = _env("LOG_FILE", DEFAULT_LOG_FILE) or "tedit.log"
        return TelemetryConfig(min_level="INFO", console=False, file_path=log_path)
    if key in {"performance", "performance_analysis"}:
        log_path = _env("LOG_FILE", DEFAULT_LOG_FILE) or "tedit-performance.log"
        return TelemetryConfig(
            min_level="DEBUG", console=False, json_format=True, file_path=log_path
        )
    raise ValueError(f"Unknown preset '{preset}'.")


def _build_default_config() -> TelemetryConfig:
    return TelemetryConfig(
        min_level=_resolve_level(),
        console=not _env_flag("DISABLE_CONSOLE", False),
        json_format=_env_flag("LOG_JSON", False),
        file_path=_env("LOG_FILE") or DEFAULT_LOG_FILE,
    )


def _install(config: TelemetryConfig) -> None:
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in _HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _HANDLERS.clear()

    if config.json_format:
        formatter: logging.Formatter = JsonLineFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    if config.console:
        _HANDLERS.append(logging.StreamHandler(sys.stderr))
    if config.file_path:
        _HANDLERS.append(logging.FileHandler(config.file_path, encoding="utf-8"))
    if not _HANDLERS:
        _HANDLERS.append(logging.NullHandler())

    for handler in _HANDLERS:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(config.min_level.upper())
    root.propagate = False


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> None:
    """Override the active logging configuration.

    Parameters
    ----------
    config:
        Explicit ``TelemetryConfig`` instance to adopt.
    preset:
        Named preset (``"development"``, ``"production"``, ``"performance"``).
        ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _ACTIVE_CONFIG = config
    _install(config)
    _LOGGER_CACHE.clear()


def active_config() -> TelemetryConfig:
    if _ACTIVE_CONFIG is None:
        configure()
    assert _ACTIVE_CONFIG is not None
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a cached logger living under the editor's root logger."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = logging.getLogger(logger_name)
    return _LOGGER_CACHE[logger_name]


def _resolve_level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return number


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record with key/value fields."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    log.log(
        _resolve_level_number(level),
        "event::%s %s",
        name,
        _format_pairs(payload),
        extra={"fields": {k: _stringify(v) for k, v in payload.items()}},
    )


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        self.logger.log(
            _resolve_level_number(level),
            "%s %s",
            message,
            _format_pairs(payload),
            extra={"fields": payload},
        )

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and log its outcome.

    Parameters
    ----------
    name:
        Operation name written with every record of the span.
    logger_name:
        Target logger; defaults to the editor logger.
    component:
        If ``True`` use the same name as the span; if a string, use it as the
        component identifier.
    metadata:
        Optional key/value pairs attached to every record of the span.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    else:
        if log.isEnabledFor(logging.DEBUG):
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            handle._emit("debug", "span::done", {"elapsed_ms": f"{elapsed_ms:.3f}"})


# Initialize the module-level logger once the config is ready.
configure()
logger = get_logger()

__all__ = [
    "JsonLineFormatter",
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
