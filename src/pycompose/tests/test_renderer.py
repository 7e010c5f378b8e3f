# ---------------------------------------------------------------------------
# File: test_renderer.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for TkRenderer and CompositionView.
#
# Notes:
#	- Tk tests are skipped when no display is available.
#	- Clicks are driven through ttk.Button.invoke(), the same path a real
#	  mouse click takes.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	pycompose maintainers		Initial tests
# 10/09/2026	pycompose maintainers		Cover configuration change re-render
# ---------------------------------------------------------------------------

from __future__ import annotations

from pycompose.core.theme import DARK_THEME, ThemeProvider
from pycompose.runtime import HostSession, column, text
from pycompose.screens import my_app
from pycompose.screens.greetings import SHOW_LESS, SHOW_MORE
from pycompose.screens.onboarding import CONTINUE_LABEL, WELCOME_TEXT
from pycompose.ui.composition_view import CompositionView
from pycompose.ui.renderer import TkRenderer, contrast_color


def _view(tk_root, clock, **props):
	session = HostSession(clock=clock)
	view = CompositionView(name="content")
	view.mount(tk_root)
	view.layout()
	view.attach(session)
	session.set_content(my_app, **props)
	return session, view


def _texts(view) -> list[str]:
	return [w.cget("text") for w in view.renderer.widgets("text")]


def _button(view, label: str, index: int = 0):
	return [w for w in view.renderer.widgets("button") if w.cget("text") == label][index]


def test_contrast_color():
	assert contrast_color("#FFFFFF") == "#000000"
	assert contrast_color("#121212") == "#FFFFFF"
	assert contrast_color("#6200EE") == "#FFFFFF"
	assert contrast_color("not-a-color") == "#000000"


def test_view_renders_onboarding(tk_root, clock):
	_, view = _view(tk_root, clock)

	assert WELCOME_TEXT in _texts(view)
	assert _button(view, CONTINUE_LABEL).cget("style") == "TButton"
	assert view.renders >= 1


def test_click_continue_shows_greetings(tk_root, clock):
	_, view = _view(tk_root, clock, names=("World", "Compose"), visible_items=2)

	_button(view, CONTINUE_LABEL).invoke()

	assert _texts(view) == ["Hello,", "World", "Hello,", "Compose"]
	assert _button(view, SHOW_MORE).cget("style") == "Outlined.TButton"


def test_widgets_are_reused_across_passes(tk_root, clock):
	_, view = _view(tk_root, clock, names=("A", "B"), visible_items=2)
	_button(view, CONTINUE_LABEL).invoke()

	before = view.renderer.widgets("text")
	_button(view, SHOW_MORE, 0).invoke()
	after = view.renderer.widgets("text")

	assert after == before
	assert [w.cget("text") for w in view.renderer.widgets("button")] == [SHOW_LESS, SHOW_MORE]


def test_configuration_change_rerenders_with_new_theme(tk_root, clock):
	session, view = _view(tk_root, clock, names=("A",), visible_items=1)
	_button(view, CONTINUE_LABEL).invoke()

	session.configuration_changed(ThemeProvider(DARK_THEME))

	assert view.root.cget("bg") == DARK_THEME.palette.background
	assert _texts(view) == ["Hello,", "A"]


def test_clicks_after_destroy_are_dropped(tk_root, clock):
	session, view = _view(tk_root, clock)
	session.destroy()

	assert view.dispatch(lambda: "never") is None


def test_renderer_removes_stale_widgets(tk_root):
	clicks = []
	renderer = TkRenderer(tk_root, ThemeProvider.for_mode(False), clicks.append)

	renderer.render(column(text("a"), text("b"), text("c")))
	assert renderer.widget_count == 4
	third = renderer.widget_at((0, 2))

	renderer.render(column(text("a")))
	assert renderer.widget_count == 2
	assert third.winfo_exists() == 0

	renderer.clear()
	assert renderer.widget_count == 0
