# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for pycompose (Tk host).
#
# Notes:
#	- Uses lazy exports so importing pycompose.app.keys/commands does not
#	  pull in Tk and ttkthemes.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"App",
	"Command",
	"CommandContext",
	"CommandRegistry",
	"KeyMap",
	"build_default_keymap",
	"register_default_commands",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"App": ("pycompose.app.app", "App"),
	"Command": ("pycompose.app.commands", "Command"),
	"CommandContext": ("pycompose.app.commands", "CommandContext"),
	"CommandRegistry": ("pycompose.app.commands", "CommandRegistry"),
	"KeyMap": ("pycompose.app.keys", "KeyMap"),
	"build_default_keymap": ("pycompose.app.keys", "build_default_keymap"),
	"register_default_commands": ("pycompose.app.default_commands", "register_default_commands"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pycompose.app.app import App
	from pycompose.app.commands import Command, CommandContext, CommandRegistry
	from pycompose.app.default_commands import register_default_commands
	from pycompose.app.keys import KeyMap, build_default_keymap
