# ---------------------------------------------------------------------------
# File: test_screens.py
# ---------------------------------------------------------------------------
# Description:
#	Behaviour tests for the Basics screens: App Root, onboarding, greeting
#	list and greeting rows.
#
# Notes:
#	- Pure unit tests on a Composition with a ManualClock; no Tkinter.
#	- Clicks go through Composition.dispatch(), the same path the Tk view
#	  uses.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	pycompose maintainers		Initial tests
# 10/07/2026	pycompose maintainers		Cover retargeting + scroll-out reset
# 10/17/2026	pycompose maintainers		Check padding against the easing curve
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pycompose.runtime import FAST_OUT_SLOW_IN, Composition, LazyListState, find_buttons, find_texts, iter_elements
from pycompose.screens import (
	EXPANDED_PADDING,
	Screen,
	current_screen,
	greeting,
	greetings,
	my_app,
	onboarding_screen,
)
from pycompose.screens.greetings import SHOW_LESS, SHOW_MORE
from pycompose.screens.onboarding import CONTINUE_LABEL, WELCOME_TEXT


def _compose(clock, **props) -> Composition:
	comp = Composition(clock=clock)
	comp.set_content(my_app, **props)
	return comp


def _click(comp: Composition, label: str, index: int = 0) -> None:
	handler = find_buttons(comp.render_tree(), label)[index].props["on_click"]
	comp.dispatch(handler)


def _paddings(comp: Composition) -> list[float]:
	return [el.props["padding_bottom"] for el in iter_elements(comp.render_tree()) if "padding_bottom" in el.props]


def _labels(comp: Composition) -> list[str]:
	return [el.props["label"] for el in find_buttons(comp.render_tree())]


def _settle(comp: Composition, clock, ms: float = 2000) -> None:
	clock.advance(ms)
	comp.frame()


# ---------------------------------------------------------------------------
# App Root / onboarding
# ---------------------------------------------------------------------------

def test_current_screen_mapping():
	assert current_screen(True) is Screen.ONBOARDING
	assert current_screen(False) is Screen.GREETING_LIST


def test_app_starts_on_onboarding(clock):
	comp = _compose(clock)

	assert WELCOME_TEXT in find_texts(comp.render_tree())
	assert _labels(comp) == [CONTINUE_LABEL]
	assert comp.find_instances(greetings) == []


def test_continue_switches_to_greeting_list(clock):
	comp = _compose(clock, names=("World", "Compose"))
	(onboarding,) = comp.find_instances(onboarding_screen)

	_click(comp, CONTINUE_LABEL)

	assert onboarding.alive is False
	assert comp.find_instances(onboarding_screen) == []
	assert len(comp.find_instances(greetings)) == 1

	texts = find_texts(comp.render_tree())
	assert texts == ["Hello,", "World", "Hello,", "Compose"]
	assert _labels(comp) == [SHOW_MORE, SHOW_MORE]


def test_greeting_list_has_no_way_back(clock):
	comp = _compose(clock, names=("A",))
	_click(comp, CONTINUE_LABEL)

	(list_inst,) = comp.find_instances(greetings)
	assert not any(callable(v) for v in list_inst.props.values())
	assert CONTINUE_LABEL not in _labels(comp)


def test_stale_continue_callback_has_no_effect(clock):
	comp = _compose(clock, names=("A",))
	stale = find_buttons(comp.render_tree(), CONTINUE_LABEL)[0].props["on_click"]

	comp.dispatch(stale)
	passes = comp.pass_count

	comp.dispatch(stale)

	assert comp.pass_count == passes
	assert len(comp.find_instances(greetings)) == 1


# ---------------------------------------------------------------------------
# Greeting list
# ---------------------------------------------------------------------------

def test_default_list_composes_only_visible_rows(clock):
	comp = _compose(clock, visible_items=8)
	_click(comp, CONTINUE_LABEL)

	rows = comp.find_instances(greeting)
	assert len(rows) == 8
	assert [r.props["name"] for r in rows] == [str(i) for i in range(8)]

	(state,) = comp.find_remembered(LazyListState)
	assert state.total == 1000


def test_empty_greeting_list(clock):
	comp = _compose(clock, names=())
	_click(comp, CONTINUE_LABEL)

	assert comp.find_instances(greeting) == []
	assert find_texts(comp.render_tree()) == []


def test_rows_are_styled_with_primary_color(clock):
	comp = _compose(clock, names=("A",))
	_click(comp, CONTINUE_LABEL)

	colors = [el.props.get("color") for el in iter_elements(comp.render_tree()) if el.kind == "surface"]
	assert comp.theme.color("primary") in colors


# ---------------------------------------------------------------------------
# Greeting row
# ---------------------------------------------------------------------------

def test_toggle_animates_padding_to_expanded(clock):
	comp = _compose(clock, names=("A", "B"), visible_items=2)
	_click(comp, CONTINUE_LABEL)

	_click(comp, SHOW_MORE, 0)

	assert _labels(comp) == [SHOW_LESS, SHOW_MORE]
	assert _paddings(comp) == [0.0, 0.0]
	assert comp.has_running_animations is True

	clock.advance(1000)
	comp.frame()
	midway = _paddings(comp)[0]
	assert 0.0 < midway < EXPANDED_PADDING

	clock.advance(1000)
	comp.frame()
	assert _paddings(comp) == [EXPANDED_PADDING, 0.0]
	assert comp.has_running_animations is False


def test_padding_follows_the_eased_curve_frame_by_frame(clock):
	comp = _compose(clock, names=("A",), visible_items=1)
	_click(comp, CONTINUE_LABEL)
	_click(comp, SHOW_MORE)

	seen = []
	for step in range(9):
		if step:
			clock.advance(250)
		comp.frame()
		(padding,) = _paddings(comp)
		expected = EXPANDED_PADDING * FAST_OUT_SLOW_IN.transform(clock.now_ms() / 2000)
		assert padding == pytest.approx(expected)
		seen.append(padding)

	assert seen == sorted(seen)
	assert seen[0] == 0.0
	assert seen[-1] == EXPANDED_PADDING
	assert comp.has_running_animations is False


def test_rows_toggle_independently(clock):
	comp = _compose(clock, names=("A", "B"), visible_items=2)
	_click(comp, CONTINUE_LABEL)
	first, second = comp.find_instances(greeting)

	_click(comp, SHOW_MORE, 1)
	_settle(comp, clock)

	assert first.invocations == 1
	assert _labels(comp) == [SHOW_MORE, SHOW_LESS]
	assert _paddings(comp) == [0.0, EXPANDED_PADDING]


def test_click_while_animating_retargets_from_current_value(clock):
	comp = _compose(clock, names=("A",), visible_items=1)
	_click(comp, CONTINUE_LABEL)

	_click(comp, SHOW_MORE)
	clock.advance(1000)
	comp.frame()
	(midway,) = _paddings(comp)

	_click(comp, SHOW_LESS)
	comp.frame()
	assert _paddings(comp)[0] == pytest.approx(midway)

	clock.advance(1000)
	comp.frame()
	(partway,) = _paddings(comp)
	assert 0.0 < partway < midway

	clock.advance(1000)
	comp.frame()
	assert _paddings(comp) == [0.0]
	assert _labels(comp) == [SHOW_MORE]


def test_toggle_twice_returns_to_collapsed(clock):
	comp = _compose(clock, names=("A",), visible_items=1)
	_click(comp, CONTINUE_LABEL)

	_click(comp, SHOW_MORE)
	_settle(comp, clock)
	_click(comp, SHOW_LESS)
	_settle(comp, clock)

	assert _paddings(comp) == [0.0]
	assert _labels(comp) == [SHOW_MORE]


def test_row_scrolled_out_comes_back_collapsed(clock):
	comp = _compose(clock, visible_items=3)
	_click(comp, CONTINUE_LABEL)
	(state,) = comp.find_remembered(LazyListState)

	_click(comp, SHOW_MORE, 0)
	_settle(comp, clock)
	assert _labels(comp)[0] == SHOW_LESS

	comp.dispatch(state.scroll_to, 10)
	assert comp.has_running_animations is False
	comp.dispatch(state.scroll_to, 0)

	assert _labels(comp) == [SHOW_MORE] * 3
	assert _paddings(comp)[0] == 0.0


def test_row_removed_mid_animation_stops_its_animation(clock):
	comp = _compose(clock, visible_items=3)
	_click(comp, CONTINUE_LABEL)
	(state,) = comp.find_remembered(LazyListState)

	_click(comp, SHOW_MORE, 0)
	assert comp.has_running_animations is True

	comp.dispatch(state.scroll_to, 10)

	assert comp.has_running_animations is False
	assert comp.frame() is False
