# ---------------------------------------------------------------------------
# File: test_theme.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pycompose.core.theme.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/04/2026	pycompose maintainers		Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pycompose.core.theme import DARK_THEME, LIGHT_THEME, ThemeProvider


def test_for_mode_picks_light_or_dark():
	assert ThemeProvider.for_mode(False).theme is LIGHT_THEME
	assert ThemeProvider.for_mode(True).theme is DARK_THEME
	assert ThemeProvider.for_mode(True).is_dark is True


def test_color_and_font_lookup():
	provider = ThemeProvider(LIGHT_THEME)

	assert provider.color("primary") == LIGHT_THEME.palette.primary
	assert provider.font("headline") == LIGHT_THEME.typography.headline


def test_unknown_roles_raise_key_error():
	provider = ThemeProvider(LIGHT_THEME)

	with pytest.raises(KeyError):
		provider.color("nope")
	with pytest.raises(KeyError):
		provider.font("nope")


def test_colors_are_read_only():
	provider = ThemeProvider(LIGHT_THEME)

	with pytest.raises(TypeError):
		provider.colors["primary"] = "#000000"  # type: ignore[index]

	assert provider.color("primary") == LIGHT_THEME.palette.primary


def test_toggled_switches_mode():
	light = ThemeProvider.for_mode(False)
	dark = light.toggled()

	assert dark.is_dark is True
	assert dark.toggled().is_dark is False
	assert light.is_dark is False


def test_each_theme_names_a_ttk_theme():
	assert LIGHT_THEME.ttk_theme == "arc"
	assert DARK_THEME.ttk_theme == "equilux"
