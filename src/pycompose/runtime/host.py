# ---------------------------------------------------------------------------
# File: host.py
# ---------------------------------------------------------------------------
# Description:
#	HostSession: lifecycle boundary between a host (Tk app, tests) and the
#	composition it displays.
#
# Notes:
#	- A configuration change (e.g. switching dark mode) saves every
#	  saveable value, disposes the composition and rebuilds it from the
#	  bundle. Transient state is lost, saveable state comes back.
#	- destroy() ends the session; nothing is carried over. A new session
#	  starts from scratch, like a fresh process.
#	- Pass listeners are re-attached to each rebuilt composition.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from pycompose.core.logging import get_runtime_logger
from pycompose.core.telemetry import Telemetry, get_telemetry
from pycompose.core.theme import LIGHT_THEME, ThemeProvider
from pycompose.runtime.clock import FrameClock, MonotonicClock
from pycompose.runtime.composition import Composition, PassListener, Scheduler
from pycompose.runtime.elements import RenderFn
from pycompose.runtime.errors import CompositionError


log = get_runtime_logger("host")


class Lifecycle(Enum):
	CREATED = "created"
	RESUMED = "resumed"
	DESTROYED = "destroyed"


class HostSession:
	def __init__(
		self,
		*,
		clock: Optional[FrameClock] = None,
		theme: Optional[ThemeProvider] = None,
		schedule: Optional[Scheduler] = None,
		request_frame: Optional[Callable[[], Any]] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.clock: FrameClock = clock or MonotonicClock()
		self.theme: ThemeProvider = theme or ThemeProvider(LIGHT_THEME)
		self.lifecycle = Lifecycle.CREATED
		self.composition: Optional[Composition] = None
		self.configuration_changes = 0

		self._schedule = schedule
		self._request_frame = request_frame
		self._telemetry = telemetry
		self._content: Optional[tuple[RenderFn, dict[str, Any]]] = None
		self._listeners: list[PassListener] = []

	# -----------------------------------------------------------------------
	# Content
	# -----------------------------------------------------------------------

	def set_content(self, fn: RenderFn, **props: Any) -> Composition:
		self._check_not_destroyed()
		if self.composition is not None:
			self.composition.dispose()

		self._content = (fn, dict(props))
		self.composition = self._build(saved=None)
		self.lifecycle = Lifecycle.RESUMED
		return self.composition

	def add_pass_listener(self, listener: PassListener) -> None:
		if listener not in self._listeners:
			self._listeners.append(listener)
		if self.composition is not None:
			self.composition.add_pass_listener(listener)

	# -----------------------------------------------------------------------
	# Lifecycle events
	# -----------------------------------------------------------------------

	def configuration_changed(self, theme: Optional[ThemeProvider] = None) -> dict[str, Any]:
		"""
		Rebuild the composition, carrying saveable state across.

		Returns the saved-state bundle that was used.
		"""
		self._check_not_destroyed()
		if self.composition is None or self._content is None:
			raise CompositionError("configuration_changed() before set_content()")

		bundle = self.composition.save_state()
		self.composition.dispose()

		if theme is not None:
			self.theme = theme

		self.composition = self._build(saved=bundle)
		self.configuration_changes += 1

		log.info("Configuration changed; restored %d saved value(s)", len(bundle))
		self._get_telemetry().event(
			"host.configuration_changed",
			{"saved_values": len(bundle), "dark": self.theme.is_dark},
		)
		return bundle

	def destroy(self) -> None:
		if self.lifecycle is Lifecycle.DESTROYED:
			return
		if self.composition is not None:
			self.composition.dispose()
		self.composition = None
		self.lifecycle = Lifecycle.DESTROYED
		self._get_telemetry().event("host.destroyed")

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _build(self, saved: Optional[dict[str, Any]]) -> Composition:
		assert self._content is not None
		fn, props = self._content

		composition = Composition(
			clock=self.clock,
			theme=self.theme,
			saved=saved,
			schedule=self._schedule,
			request_frame=self._request_frame,
			telemetry=self._telemetry,
		)
		for listener in self._listeners:
			composition.add_pass_listener(listener)

		composition.set_content(fn, **props)
		return composition

	def _check_not_destroyed(self) -> None:
		if self.lifecycle is Lifecycle.DESTROYED:
			raise CompositionError("HostSession has been destroyed")

	def _get_telemetry(self) -> Telemetry:
		return self._telemetry if self._telemetry is not None else get_telemetry()
