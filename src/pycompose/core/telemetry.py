# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry for pycompose.
#
#	The composition runtime reports what each pass did:
#		composition.pass_ms			timer, one per pass
#		composition.nodes_invoked	counter, render functions re-run
#		composition.nodes_created	counter, instances entering the tree
#		composition.nodes_destroyed	counter, instances leaving the tree
#	The host reports lifecycle events (host.configuration_changed, ...).
#
# Notes:
#	- Safe to call even when disabled (default).
#	- Backends are sinks: NullSink, LogSink, MemorySink (tests).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	pycompose maintainers		Initial coding / release
# 10/06/2026	pycompose maintainers		Float timers + MemorySink.total()
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol


# ---------------------------------------------------------------------------
# Telemetry data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Emit telemetry as DEBUG records on a logger.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%.3f attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def total(self, name: str) -> float:
		"""
		Sum of every metric value recorded under name.
		"""
		return sum(m.value for m in self.metrics if m.name == name)

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	@property
	def sink(self) -> TelemetrySink:
		return self._sink

	def event(self, name: str, attrs: Optional[dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name, time.time(), attrs or {}))

	def counter(self, name: str, value: float = 1, attrs: Optional[dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name, float(value), attrs or {}))

	def timer(self, name: str, attrs: Optional[dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager recording elapsed milliseconds as a metric.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0
		self.elapsed_ms = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, self.elapsed_ms, self._attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize the global telemetry instance.

	Expected cfg keys:
		telemetry.enabled:	bool
		telemetry.sink:		"null" | "log" | "memory"
	"""
	global _telemetry

	enabled = cfg.get("telemetry.enabled", False)
	if isinstance(enabled, str):
		enabled = enabled.strip().lower() in ("1", "true", "yes", "on")

	sink_name = str(cfg.get("telemetry.sink", "null")).lower()

	sink: TelemetrySink
	if not enabled:
		sink = NullSink()
	elif sink_name == "log" and logger is not None:
		sink = LogSink(logger)
	elif sink_name == "memory":
		sink = MemorySink()
	else:
		sink = NullSink()

	_telemetry = Telemetry(bool(enabled), sink)
	return _telemetry


def set_telemetry(telemetry: Optional[Telemetry]) -> None:
	"""
	Replace the global instance (None restores the disabled default).
	"""
	global _telemetry
	_telemetry = telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance; disabled until init_telemetry().
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())

	return _telemetry
