# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	Theme tokens (palette + typography) and a read-only provider.
#
# Notes:
#	- Render functions read colors/fonts through scope.theme and never
#	  mutate it. Switching themes is a host configuration change.
#	- ttk_theme names a ttkthemes base theme applied by the Tk host.
#	- No Tk imports here; fonts are plain (family, size, weight) tuples.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


FontSpec = tuple[str, int, str]


@dataclass(frozen=True, slots=True)
class Palette:
	primary: str
	on_primary: str
	background: str
	on_background: str
	surface: str
	on_surface: str

	def as_mapping(self) -> Mapping[str, str]:
		return MappingProxyType({
			"primary": self.primary,
			"on_primary": self.on_primary,
			"background": self.background,
			"on_background": self.on_background,
			"surface": self.surface,
			"on_surface": self.on_surface,
		})


@dataclass(frozen=True, slots=True)
class Typography:
	body: FontSpec = ("TkDefaultFont", 11, "normal")
	headline: FontSpec = ("TkDefaultFont", 16, "bold")
	title: FontSpec = ("TkDefaultFont", 14, "normal")
	button: FontSpec = ("TkDefaultFont", 10, "bold")

	def as_mapping(self) -> Mapping[str, FontSpec]:
		return MappingProxyType({
			"body": self.body,
			"headline": self.headline,
			"title": self.title,
			"button": self.button,
		})


@dataclass(frozen=True, slots=True)
class Theme:
	name: str
	dark: bool
	palette: Palette
	typography: Typography = Typography()
	ttk_theme: str = "arc"


LIGHT_THEME = Theme(
	name="light",
	dark=False,
	palette=Palette(
		primary="#6200EE",
		on_primary="#FFFFFF",
		background="#FFFFFF",
		on_background="#000000",
		surface="#FFFFFF",
		on_surface="#000000",
	),
	ttk_theme="arc",
)

DARK_THEME = Theme(
	name="dark",
	dark=True,
	palette=Palette(
		primary="#BB86FC",
		on_primary="#000000",
		background="#121212",
		on_background="#FFFFFF",
		surface="#121212",
		on_surface="#FFFFFF",
	),
	ttk_theme="equilux",
)


class ThemeProvider:
	"""
	ThemeProvider

	Read-only lookup over a Theme. Unknown roles raise KeyError.
	"""

	def __init__(self, theme: Theme) -> None:
		self._theme = theme
		self._colors = theme.palette.as_mapping()
		self._fonts = theme.typography.as_mapping()

	@classmethod
	def for_mode(cls, dark: bool) -> "ThemeProvider":
		return cls(DARK_THEME if dark else LIGHT_THEME)

	@property
	def theme(self) -> Theme:
		return self._theme

	@property
	def is_dark(self) -> bool:
		return self._theme.dark

	@property
	def colors(self) -> Mapping[str, str]:
		return self._colors

	@property
	def fonts(self) -> Mapping[str, FontSpec]:
		return self._fonts

	def color(self, role: str) -> str:
		try:
			return self._colors[role]
		except KeyError as ex:
			raise KeyError(f"Unknown color role: {role!r}") from ex

	def font(self, role: str) -> FontSpec:
		try:
			return self._fonts[role]
		except KeyError as ex:
			raise KeyError(f"Unknown font role: {role!r}") from ex

	def toggled(self) -> "ThemeProvider":
		return ThemeProvider.for_mode(not self.is_dark)

	def __repr__(self) -> str:
		return f"<ThemeProvider {self._theme.name}>"
