# ---------------------------------------------------------------------------
# File: screens/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Basics screens: App Root, onboarding, greeting list, greeting row.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .app_root import Screen, current_screen, my_app
from .greetings import DEFAULT_NAMES, EXPANDED_PADDING, TOGGLE_DURATION_MS, greeting, greetings
from .onboarding import onboarding_screen

__all__ = [
	"DEFAULT_NAMES",
	"EXPANDED_PADDING",
	"Screen",
	"TOGGLE_DURATION_MS",
	"current_screen",
	"greeting",
	"greetings",
	"my_app",
	"onboarding_screen",
]
