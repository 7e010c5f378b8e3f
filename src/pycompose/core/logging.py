# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pycompose (stdlib logging).
#
# Notes:
#	- Safe to call before any Tk window exists.
#	- Idempotent initialization (won't duplicate handlers).
#	- Two logger families:
#		pycompose.app.*		host, commands, Tk rendering
#		pycompose.runtime.*	composition, state, animation
#
#	Supported cfg keys (AppConfig or any object with get(key, default)):
#		logging.level		(default: "INFO")
#		logging.console		(default: True)
#		logging.file		(default: None)
#		logging.file_mode	(default: "a")
#		logging.reset_root	(default: True)
#		logging.format		(default: LOG_FORMAT)
#		logging.datefmt		(default: LOG_DATEFMT)
#		logging.runtime_level	(default: same as logging.level)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	pycompose maintainers		Initial coding / release
# 10/04/2026	pycompose maintainers		Add runtime logger family + runtime_level
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any


APP_LOGGER = "pycompose.app"
RUNTIME_LOGGER = "pycompose.runtime"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_ACTIVE: "_LoggingOptions | None" = None


@dataclass(frozen=True, slots=True)
class _LoggingOptions:
	level: int
	runtime_level: int
	console: bool
	log_file: str | None
	file_mode: str
	fmt: str
	datefmt: str
	reset_root: bool


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a host-side logger.

	Examples:
		get_app_logger()            -> pycompose.app
		get_app_logger("commands")  -> pycompose.app.commands
	"""
	return logging.getLogger(_child(APP_LOGGER, component))


def get_runtime_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a composition-runtime logger.

	Examples:
		get_runtime_logger("composition") -> pycompose.runtime.composition
		get_runtime_logger("state")       -> pycompose.runtime.state
	"""
	return logging.getLogger(_child(RUNTIME_LOGGER, component))


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pycompose.

	Safe to call multiple times; handlers are rebuilt only when the
	resolved options change.
	"""
	global _ACTIVE

	options = _resolve(cfg)
	if _ACTIVE == options:
		return

	_configure(options)
	_ACTIVE = options


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _child(base: str, component: str | None) -> str:
	return f"{base}.{component}" if component else base


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		value = getter(key, default)
		return default if value is None else value

	return default


def _resolve(cfg: Any | None) -> _LoggingOptions:
	level = _coerce_level(
		os.environ.get("PYCOMPOSE_LOG_LEVEL") or _cfg_get(cfg, "logging.level", "INFO")
	)
	runtime_level = _coerce_level(_cfg_get(cfg, "logging.runtime_level", level))

	log_file = _cfg_get(cfg, "logging.file", None)

	return _LoggingOptions(
		level=level,
		runtime_level=runtime_level,
		console=bool(_cfg_get(cfg, "logging.console", True)),
		log_file=str(log_file) if log_file else None,
		file_mode=_coerce_file_mode(_cfg_get(cfg, "logging.file_mode", "a")),
		fmt=str(_cfg_get(cfg, "logging.format", LOG_FORMAT)),
		datefmt=str(_cfg_get(cfg, "logging.datefmt", LOG_DATEFMT)),
		reset_root=bool(_cfg_get(cfg, "logging.reset_root", True)),
	)


def _coerce_level(level: Any) -> int:
	"""
	Accept ints, level names ("debug") and numeric strings ("10").
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _configure(options: _LoggingOptions) -> None:
	root = logging.getLogger()
	root.setLevel(min(options.level, options.runtime_level))

	if options.reset_root:
		for handler in list(root.handlers):
			root.removeHandler(handler)
			handler.close()

	formatter = logging.Formatter(fmt=options.fmt, datefmt=options.datefmt)

	if options.console:
		ch = logging.StreamHandler()
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if options.log_file:
		parent = os.path.dirname(os.path.abspath(options.log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(options.log_file, mode=options.file_mode, encoding="utf-8")
		fh.setFormatter(formatter)
		root.addHandler(fh)

	logging.getLogger(APP_LOGGER).setLevel(options.level)
	logging.getLogger(RUNTIME_LOGGER).setLevel(options.runtime_level)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _ACTIVE
	_ACTIVE = None
