# ---------------------------------------------------------------------------
# File: animation.py
# ---------------------------------------------------------------------------
# Description:
#	Time-based value animation for the composition runtime.
#
# Notes:
#	- FloatAnimation is a plain state object sampled at a given time; it
#	  never touches the clock itself.
#	- AnimatedFloat couples one FloatAnimation to one StateCell. Each frame
#	  writes the sampled value into the cell, which re-invokes the owner.
#	- Retargeting restarts the timeline from the value sampled *now*, so an
#	  interrupted animation never jumps back to its original start.
#	- Easing curves match the Material defaults.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	pycompose maintainers		Initial coding / release
# 10/06/2026	pycompose maintainers		Bisection fallback in CubicBezierEasing
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
	from pycompose.runtime.state import StateCell


# ---------------------------------------------------------------------------
# Easing
# ---------------------------------------------------------------------------

@runtime_checkable
class Easing(Protocol):
	def transform(self, fraction: float) -> float: ...


class LinearEasing:
	def transform(self, fraction: float) -> float:
		return fraction

	def __repr__(self) -> str:
		return "LinearEasing()"


class CubicBezierEasing:
	"""
	Cubic bezier from (0, 0) to (1, 1) with control points (x1, y1), (x2, y2).

	transform() solves x(t) = fraction for t, then returns y(t).
	"""

	_EPSILON = 1e-6

	def __init__(self, x1: float, y1: float, x2: float, y2: float) -> None:
		if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
			raise ValueError("Control point x values must be within [0, 1]")
		self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

	@staticmethod
	def _bezier(t: float, p1: float, p2: float) -> float:
		u = 1.0 - t
		return 3.0 * u * u * t * p1 + 3.0 * u * t * t * p2 + t * t * t

	@staticmethod
	def _slope(t: float, p1: float, p2: float) -> float:
		u = 1.0 - t
		return 3.0 * u * u * p1 + 6.0 * u * t * (p2 - p1) + 3.0 * t * t * (1.0 - p2)

	def _solve_t(self, x: float) -> float:
		t = x
		for _ in range(8):
			err = self._bezier(t, self.x1, self.x2) - x
			if abs(err) < self._EPSILON:
				return t
			slope = self._slope(t, self.x1, self.x2)
			if abs(slope) < self._EPSILON:
				break
			t -= err / slope

		lo, hi = 0.0, 1.0
		t = x
		while hi - lo > self._EPSILON:
			if self._bezier(t, self.x1, self.x2) < x:
				lo = t
			else:
				hi = t
			t = (lo + hi) / 2.0
		return t

	def transform(self, fraction: float) -> float:
		if fraction <= 0.0:
			return 0.0
		if fraction >= 1.0:
			return 1.0
		return self._bezier(self._solve_t(fraction), self.y1, self.y2)

	def __repr__(self) -> str:
		return f"CubicBezierEasing({self.x1}, {self.y1}, {self.x2}, {self.y2})"


LINEAR = LinearEasing()
FAST_OUT_SLOW_IN = CubicBezierEasing(0.4, 0.0, 0.2, 1.0)
LINEAR_OUT_SLOW_IN = CubicBezierEasing(0.0, 0.0, 0.2, 1.0)
FAST_OUT_LINEAR_IN = CubicBezierEasing(0.4, 0.0, 1.0, 1.0)


# ---------------------------------------------------------------------------
# Specs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TweenSpec:
	duration_ms: float = 300.0
	delay_ms: float = 0.0
	easing: Easing = field(default=FAST_OUT_SLOW_IN)

	def __post_init__(self) -> None:
		if self.duration_ms < 0:
			raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms!r}")
		if self.delay_ms < 0:
			raise ValueError(f"delay_ms must be >= 0, got {self.delay_ms!r}")


def tween(duration_ms: float = 300.0, delay_ms: float = 0.0, easing: Easing = FAST_OUT_SLOW_IN) -> TweenSpec:
	return TweenSpec(duration_ms=duration_ms, delay_ms=delay_ms, easing=easing)


# ---------------------------------------------------------------------------
# FloatAnimation
# ---------------------------------------------------------------------------

class AnimationStatus(Enum):
	RUNNING = "running"
	FINISHED = "finished"
	CANCELLED = "cancelled"


@dataclass(slots=True)
class FloatAnimation:
	"""
	FloatAnimation

	{start_value, target, start_time, spec}; sampled by the scheduler.
	"""
	start_value: float
	target: float
	start_time: float
	spec: TweenSpec = field(default_factory=TweenSpec)
	status: AnimationStatus = AnimationStatus.RUNNING

	@property
	def end_time(self) -> float:
		return self.start_time + self.spec.delay_ms + self.spec.duration_ms

	def fraction(self, now: float) -> float:
		elapsed = now - self.start_time - self.spec.delay_ms
		if self.spec.duration_ms <= 0:
			return 1.0 if elapsed >= 0 else 0.0
		return min(1.0, max(0.0, elapsed / self.spec.duration_ms))

	def sample(self, now: float) -> float:
		fraction = self.fraction(now)
		if fraction >= 1.0:
			return self.target
		eased = self.spec.easing.transform(fraction)
		return self.start_value + (self.target - self.start_value) * eased

	def is_finished(self, now: float) -> bool:
		return self.status is not AnimationStatus.RUNNING or now >= self.end_time

	def retarget(self, target: float, now: float) -> None:
		self.start_value = self.sample(now)
		self.start_time = now
		self.target = target
		self.status = AnimationStatus.RUNNING


# ---------------------------------------------------------------------------
# AnimatedFloat
# ---------------------------------------------------------------------------

class AnimationDriver(Protocol):
	"""
	What an AnimatedFloat needs from the composition.
	"""

	def start_animation(self, animated: "AnimatedFloat") -> None: ...
	def stop_animation(self, animated: "AnimatedFloat") -> None: ...


class AnimatedFloat:
	"""
	AnimatedFloat

	Remembered by its owner; one per animate_float() call site.
	"""

	def __init__(self, cell: "StateCell[float]", spec: TweenSpec, driver: AnimationDriver) -> None:
		self._cell = cell
		self._spec = spec
		self._driver = driver
		self._target = cell.peek()
		self.animation: Optional[FloatAnimation] = None

	@property
	def value(self) -> float:
		return self._cell.value

	@property
	def target(self) -> float:
		return self._target

	@property
	def is_running(self) -> bool:
		return self.animation is not None and self.animation.status is AnimationStatus.RUNNING

	def animate_to(self, target: float, now: float, spec: Optional[TweenSpec] = None) -> None:
		if spec is not None:
			self._spec = spec

		if target == self._target:
			return
		self._target = target

		if self.is_running:
			self.animation.retarget(target, now)  # type: ignore[union-attr]
			self.animation.spec = self._spec  # type: ignore[union-attr]
		else:
			self.animation = FloatAnimation(self._cell.peek(), target, now, self._spec)

		self._driver.start_animation(self)

	def tick(self, now: float) -> bool:
		"""
		Write the value for this frame. Returns True while still running.
		"""
		anim = self.animation
		if anim is None or anim.status is not AnimationStatus.RUNNING:
			return False

		self._cell.set(anim.sample(now))

		if anim.is_finished(now):
			anim.status = AnimationStatus.FINISHED
			return False
		return True

	def snap_to(self, value: float) -> None:
		self.cancel()
		self._target = value
		self._cell.set(value)

	def cancel(self) -> None:
		if self.is_running:
			self.animation.status = AnimationStatus.CANCELLED  # type: ignore[union-attr]
			self._driver.stop_animation(self)

	def dispose(self) -> None:
		self.cancel()
		self._cell.dispose()
