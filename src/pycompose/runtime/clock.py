# ---------------------------------------------------------------------------
# File: clock.py
# ---------------------------------------------------------------------------
# Description:
#	Frame clocks for the composition runtime.
#
# Notes:
#	- Time is in milliseconds as float.
#	- ManualClock only moves when told to (tests, previews).
#	- MonotonicClock follows time.perf_counter (Tk host).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class FrameClock(Protocol):
	def now_ms(self) -> float: ...


class ManualClock:
	def __init__(self, start_ms: float = 0.0) -> None:
		self._now = float(start_ms)

	def now_ms(self) -> float:
		return self._now

	def advance(self, delta_ms: float) -> float:
		if delta_ms < 0:
			raise ValueError("ManualClock cannot move backwards")
		self._now += float(delta_ms)
		return self._now

	def set(self, now_ms: float) -> None:
		if now_ms < self._now:
			raise ValueError("ManualClock cannot move backwards")
		self._now = float(now_ms)

	def __repr__(self) -> str:
		return f"<ManualClock now={self._now:.1f}ms>"


class MonotonicClock:
	def __init__(self) -> None:
		self._origin = time.perf_counter()

	def now_ms(self) -> float:
		return (time.perf_counter() - self._origin) * 1000.0
