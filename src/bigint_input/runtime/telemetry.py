"""Structured logging for the input engine, backed by telelog.

Engine code only talks to three helpers: :func:`get_logger`,
:func:`record_event` for one-off facts (a history move, a locale fallback)
and :func:`span` around each state mutation of a field. Hosts pick the
output with :func:`configure`; without it the ``BIGINT_INPUT_*``
environment variables decide.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "BIGINT_INPUT_"
DEFAULT_LOGGER = "bigint_input"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name) or None


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Where log records go and how much of them to keep."""

    logger_name: str = DEFAULT_LOGGER
    level: str = "WARNING"
    console: bool = True
    colored: bool = True
    json_format: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            logger_name=_env("LOGGER") or DEFAULT_LOGGER,
            level=(_env("LOG_LEVEL") or "WARNING").upper(),
            console=not _env_flag("DISABLE_CONSOLE"),
            colored=not _env_flag("NO_COLOR"),
            json_format=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or "",
            buffered=_env_flag("LOG_BUFFERED"),
            buffer_size=int(_env("LOG_BUFFER_SIZE") or 2048),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json_format)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        return config


SETTINGS = TelemetrySettings.from_env()

# Overrides layered on top of the environment settings.
PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {"level": "DEBUG", "console": True, "colored": True},
    "production": {"level": "INFO", "console": False, "buffered": True},
    # Textual owns the terminal; anything printed there corrupts the screen.
    "quiet": {"level": "ERROR", "console": False},
}


def preset_settings(preset: str) -> TelemetrySettings:
    try:
        overrides = PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown telemetry preset '{preset}'.") from None
    settings = replace(SETTINGS, **overrides)
    if preset.lower() == "production" and not settings.log_file:
        settings = replace(settings, log_file=f"{DEFAULT_LOGGER}.log")
    return settings


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the telelog configuration used by every logger handed out next.

    ``config`` is a ready ``telelog.Config``; ``preset`` names one of
    :data:`PRESETS`. With neither, the environment settings apply again.
    """

    global _CONFIG
    if config is not None and preset is not None:
        raise ValueError("Pass either a config or a preset, not both.")
    if preset is not None:
        config = preset_settings(preset).to_config()
    _CONFIG = config if config is not None else SETTINGS.to_config()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name``."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = SETTINGS.to_config()
    key = name or SETTINGS.logger_name
    logger = _LOGGERS.get(key)
    if logger is None:
        logger = _LOGGERS[key] = tl.Logger.with_config(key, _CONFIG)
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in data.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Collects metadata for the block wrapped by :func:`span`."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            data["component"] = self.component_name
        data["reason"] = reason
        _emit(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the wrapped block under ``name``.

    ``component`` also tracks the block as a telelog component (``True``
    reuses ``name``). ``metadata`` stays attached as logger context until the
    block exits; an exception is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _text(value) for key, value in (metadata or {}).items()},
    )

    with ExitStack() as stack:
        for key, value in list(handle.metadata.items()):
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SETTINGS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "logger",
    "preset_settings",
    "record_event",
    "span",
]
