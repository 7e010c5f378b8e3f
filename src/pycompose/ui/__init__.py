# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for pycompose (Tk host widgets).
#
# Notes:
#	- Uses lazy exports to avoid circular imports (PEP 562).
#	- Do NOT import from pycompose.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"CompositionView",
	"TkRenderer",
	"contrast_color",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pycompose.ui.component", "Component"),
	"CompositionView": ("pycompose.ui.composition_view", "CompositionView"),
	"TkRenderer": ("pycompose.ui.renderer", "TkRenderer"),
	"contrast_color": ("pycompose.ui.renderer", "contrast_color"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for pycompose.ui exports.
	"""
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
	from pycompose.ui.component import Component
	from pycompose.ui.composition_view import CompositionView
	from pycompose.ui.renderer import TkRenderer, contrast_color
