# ---------------------------------------------------------------------------
# File: app_root.py
# ---------------------------------------------------------------------------
# Description:
#	App Root: shows onboarding first, then the greeting list.
#
# Notes:
#	- One flag, show_onboarding, owned here. The onboarding screen gets a
#	  callback that clears it; the greeting list gets nothing, so there is
#	  no way back to onboarding.
#	- Switching branches destroys the onboarding subtree and creates the
#	  greeting list from scratch.
#	- With persist=True (default) the flag is saveable: a configuration
#	  change resumes on the greeting list. A new session always starts at
#	  onboarding.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# 10/07/2026	pycompose maintainers		Saveable onboarding flag
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Sequence

from pycompose.runtime import Element, Scope, component
from pycompose.screens.greetings import DEFAULT_NAMES, EXPANDED_PADDING, TOGGLE_DURATION_MS, greetings
from pycompose.screens.onboarding import onboarding_screen


class Screen(Enum):
	ONBOARDING = "onboarding"
	GREETING_LIST = "greeting_list"


def current_screen(show_onboarding: bool) -> Screen:
	return Screen.ONBOARDING if show_onboarding else Screen.GREETING_LIST


def my_app(
	scope: Scope,
	*,
	names: Sequence[str] = DEFAULT_NAMES,
	visible_items: int = 8,
	expanded_padding: float = EXPANDED_PADDING,
	duration_ms: float = TOGGLE_DURATION_MS,
	persist: bool = True,
) -> Element:
	if persist:
		show_onboarding = scope.saveable_state(True, label="show_onboarding")
	else:
		show_onboarding = scope.state(True, label="show_onboarding")

	if current_screen(show_onboarding.value) is Screen.ONBOARDING:
		return component(onboarding_screen, on_continue=lambda: show_onboarding.set(False))

	return component(
		greetings,
		names=tuple(names),
		visible_items=visible_items,
		expanded_padding=expanded_padding,
		duration_ms=duration_ms,
	)
