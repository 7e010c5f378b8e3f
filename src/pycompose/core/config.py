# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Application configuration for pycompose.
#
# Notes:
#	- AppConfig is a thin, immutable view over an options dict.
#	- User options are layered on top of DEFAULTS (user wins).
#	- Keys are flat dotted strings ("greetings.count"), no nesting.
#	- No Tk dependencies; safe to import from runtime code and tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	pycompose maintainers		Initial coding / release
# 10/05/2026	pycompose maintainers		Add typed getters + env overrides
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping


DEFAULTS: dict[str, Any] = {
	# Window
	"title": "Basics",
	"window.width": 420,
	"window.height": 720,

	# Greeting list
	"greetings.count": 1000,
	"greetings.visible_items": 8,
	"greetings.item_height": 88,

	# Greeting item
	"greeting.expanded_padding": 48.0,
	"greeting.animation_ms": 2000,

	# Host runtime
	"frame.interval_ms": 16,
	"theme.dark": False,

	# Logging (see core/logging.py)
	"logging.level": "INFO",
	"logging.console": True,
	"logging.file": None,

	# Telemetry (see core/telemetry.py)
	"telemetry.enabled": False,
	"telemetry.sink": "null",
}

# Environment variables that override a config key when set.
ENV_OVERRIDES: dict[str, str] = {
	"PYCOMPOSE_LOG_LEVEL": "logging.level",
	"PYCOMPOSE_DARK": "theme.dark",
	"PYCOMPOSE_TELEMETRY": "telemetry.enabled",
}

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.

	Lookups fall back to DEFAULTS, then to the caller's default.
	"""
	options: Mapping[str, Any] | None = None
	defaults: Mapping[str, Any] = field(default_factory=lambda: dict(DEFAULTS))

	@classmethod
	def from_env(
		cls,
		options: Mapping[str, Any] | None = None,
		environ: Mapping[str, str] | None = None,
	) -> "AppConfig":
		"""
		Build a config where PYCOMPOSE_* environment variables override options.
		"""
		env = os.environ if environ is None else environ
		merged: dict[str, Any] = dict(options or {})

		for var, key in ENV_OVERRIDES.items():
			if var in env:
				merged[key] = env[var]

		return cls(merged)

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is not None and key in self.options:
			return self.options[key]
		return self.defaults.get(key, default)

	def get_int(self, key: str, default: int = 0) -> int:
		value = self.get(key, default)
		try:
			return int(value)
		except (TypeError, ValueError) as ex:
			raise ValueError(f"Config key {key!r} is not an int: {value!r}") from ex

	def get_float(self, key: str, default: float = 0.0) -> float:
		value = self.get(key, default)
		try:
			return float(value)
		except (TypeError, ValueError) as ex:
			raise ValueError(f"Config key {key!r} is not a number: {value!r}") from ex

	def get_bool(self, key: str, default: bool = False) -> bool:
		value = self.get(key, default)
		if isinstance(value, bool):
			return value
		if isinstance(value, (int, float)):
			return bool(value)
		if isinstance(value, str):
			val = value.strip().lower()
			if val in _TRUE:
				return True
			if val in _FALSE:
				return False
		raise ValueError(f"Config key {key!r} is not a bool: {value!r}")

	def with_options(self, **changes: Any) -> "AppConfig":
		"""
		Return a copy with some keys replaced.

		Keyword names use "__" for ".", e.g. theme__dark=True.
		"""
		merged: dict[str, Any] = dict(self.options or {})
		for name, value in changes.items():
			merged[name.replace("__", ".")] = value
		return AppConfig(merged, self.defaults)
