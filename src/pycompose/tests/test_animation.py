# ---------------------------------------------------------------------------
# File: test_animation.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for easing curves, FloatAnimation and AnimatedFloat.
#
# Notes:
#	- Time is always explicit (ManualClock or plain numbers).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pycompose maintainers		Initial tests
# 10/17/2026	pycompose maintainers		Pin fast-out-slow-in reference value
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pycompose.runtime import (
	FAST_OUT_SLOW_IN,
	LINEAR,
	AnimatedFloat,
	Composition,
	CubicBezierEasing,
	FloatAnimation,
	TweenSpec,
	column,
	text,
	tween,
)
from pycompose.runtime.animation import AnimationStatus


def test_fast_out_slow_in_endpoints_and_monotonic():
	assert FAST_OUT_SLOW_IN.transform(0.0) == 0.0
	assert FAST_OUT_SLOW_IN.transform(1.0) == 1.0

	samples = [FAST_OUT_SLOW_IN.transform(i / 50) for i in range(51)]
	for a, b in zip(samples, samples[1:]):
		assert b >= a - 1e-6


def test_fast_out_slow_in_is_ahead_of_linear_midway():
	# Decelerating curve: more than half the distance is covered at t=0.5.
	assert FAST_OUT_SLOW_IN.transform(0.5) > 0.5


def test_fast_out_slow_in_reference_values():
	assert FAST_OUT_SLOW_IN.transform(0.5) == pytest.approx(0.7756, abs=1e-3)
	assert LINEAR.transform(0.5) == 0.5


def test_bezier_rejects_out_of_range_control_points():
	with pytest.raises(ValueError):
		CubicBezierEasing(1.5, 0.0, 0.2, 1.0)


def test_tween_spec_rejects_negative_values():
	with pytest.raises(ValueError):
		TweenSpec(duration_ms=-1)
	with pytest.raises(ValueError):
		tween(100, delay_ms=-5)


def test_float_animation_samples_start_and_target():
	anim = FloatAnimation(0.0, 48.0, 0.0, tween(2000))

	assert anim.sample(0.0) == 0.0
	assert 0.0 < anim.sample(1000.0) < 48.0
	assert anim.sample(2000.0) == 48.0
	assert anim.sample(5000.0) == 48.0
	assert anim.is_finished(2000.0) is True


def test_float_animation_delay_holds_start_value():
	anim = FloatAnimation(10.0, 20.0, 0.0, tween(100, delay_ms=50, easing=LINEAR))

	assert anim.sample(40.0) == 10.0
	assert anim.sample(100.0) == pytest.approx(15.0)
	assert anim.end_time == 150.0


def test_retarget_continues_from_current_value():
	anim = FloatAnimation(0.0, 48.0, 0.0, tween(2000))
	midway = anim.sample(1000.0)

	anim.retarget(0.0, 1000.0)

	assert anim.sample(1000.0) == pytest.approx(midway)
	assert 0.0 < anim.sample(2000.0) < midway
	assert anim.sample(3000.0) == 0.0


class _Driver:
	def __init__(self) -> None:
		self.started: list[AnimatedFloat] = []
		self.stopped: list[AnimatedFloat] = []

	def start_animation(self, animated: AnimatedFloat) -> None:
		self.started.append(animated)

	def stop_animation(self, animated: AnimatedFloat) -> None:
		self.stopped.append(animated)


def _animated(initial: float = 0.0):
	holder = {}

	def owner(scope):
		holder["cell"] = scope.state(initial)
		return None

	Composition().set_content(owner)
	driver = _Driver()
	return AnimatedFloat(holder["cell"], tween(1000, easing=LINEAR), driver), driver


def test_animated_float_same_target_is_noop():
	animated, driver = _animated(5.0)

	animated.animate_to(5.0, now=0.0)

	assert driver.started == []
	assert animated.is_running is False


def test_animated_float_tick_writes_value_until_finished():
	animated, driver = _animated(0.0)

	animated.animate_to(100.0, now=0.0)
	assert driver.started == [animated]

	assert animated.tick(500.0) is True
	assert animated.value == pytest.approx(50.0)

	assert animated.tick(1000.0) is False
	assert animated.value == 100.0
	assert animated.animation.status is AnimationStatus.FINISHED


def test_animated_float_retargets_while_running():
	animated, _ = _animated(0.0)

	animated.animate_to(100.0, now=0.0)
	animated.tick(500.0)
	animated.animate_to(0.0, now=500.0)

	assert animated.target == 0.0
	assert animated.tick(500.0) is True
	assert animated.value == pytest.approx(50.0)
	animated.tick(1500.0)
	assert animated.value == 0.0


def test_cancel_and_snap_stop_the_animation():
	animated, driver = _animated(0.0)

	animated.animate_to(10.0, now=0.0)
	animated.snap_to(3.0)

	assert animated.is_running is False
	assert driver.stopped == [animated]
	assert animated.value == 3.0


def test_scope_animate_float_runs_on_composition_frames(clock):
	cells = {}

	def panel(scope):
		cells["open"] = scope.state(False)
		height = scope.animate_float(100.0 if cells["open"].value else 0.0, tween(400, easing=LINEAR))
		return column(text(f"{height:.1f}"))

	frames = []
	comp = Composition(clock=clock, request_frame=lambda: frames.append(clock.now_ms()))
	comp.set_content(panel)

	comp.dispatch(cells["open"].set, True)
	assert frames == [0.0]
	assert comp.has_running_animations is True

	clock.advance(200)
	assert comp.frame() is True

	clock.advance(200)
	assert comp.frame() is False
	assert comp.has_running_animations is False

	assert comp.render_tree().children[0].props["text"] == "100.0"
