# ---------------------------------------------------------------------------
# File: onboarding.py
# ---------------------------------------------------------------------------
# Description:
#	Onboarding screen: welcome text and a Continue button.
#
# Notes:
#	- Owns no state. The flag it clears lives in the App Root and is only
#	  reachable through on_continue.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable

from pycompose.runtime import Element, Scope, button, column, surface, text


WELCOME_TEXT = "Welcome to the Basics Codelab!"
CONTINUE_LABEL = "Continue"


def onboarding_screen(scope: Scope, *, on_continue: Callable[[], None]) -> Element:
	return surface(
		column(
			text(WELCOME_TEXT, font="title"),
			button(CONTINUE_LABEL, on_continue, padding=(0, 24)),
			fill=True,
			align="center",
		),
		color=scope.theme.color("background"),
		fill=True,
	)
