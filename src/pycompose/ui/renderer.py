# ---------------------------------------------------------------------------
# File: renderer.py
# ---------------------------------------------------------------------------
# Description:
#	TkRenderer: turns a primitive Element tree into Tk widgets.
#
# Notes:
#	- Widgets are reused by tree position (path of child indices) as long
#	  as the element kind at that position is unchanged; otherwise the old
#	  widget (and everything under it) is destroyed and rebuilt.
#	- Mapping:
#		text		-> tk.Label
#		button		-> ttk.Button ("Outlined.TButton" for variant="outlined")
#		column/row	-> tk.Frame, children packed top-down / left-right
#		surface		-> tk.Frame with its color as background
#	- padding is internal (padx/pady on the frame); padding_bottom adds a
#	  spacer frame under the last child.
#	- Clicks go through the dispatch callable, never straight to handlers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	pycompose maintainers		Initial coding / release
# 10/09/2026	pycompose maintainers		Keep pack order stable across passes
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from pycompose.core.logging import get_app_logger
from pycompose.core.theme import ThemeProvider
from pycompose.runtime.elements import BUTTON, COLUMN, ROW, SURFACE, TEXT, ClickHandler, Element


Path = tuple[int, ...]
Dispatch = Callable[[ClickHandler], Any]

CONTAINERS = frozenset({COLUMN, ROW, SURFACE})

log = get_app_logger("renderer")


@dataclass(slots=True)
class _Mounted:
	kind: str
	widget: tk.Widget


def _pad(value: Any) -> tuple[int, int]:
	"""
	padding prop -> (horizontal, vertical) pixels.
	"""
	if value is None:
		return (0, 0)
	if isinstance(value, (int, float)):
		return (int(value), int(value))
	h, v = value
	return (int(h), int(v))


def contrast_color(bg: str) -> str:
	"""
	Black or white, whichever reads better on bg ("#RRGGBB").
	"""
	try:
		r, g, b = (int(bg[i:i + 2], 16) for i in (1, 3, 5))
	except (TypeError, ValueError):
		return "#000000"
	luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255.0
	return "#000000" if luminance > 0.6 else "#FFFFFF"


class TkRenderer:
	def __init__(self, host: tk.Misc, theme: ThemeProvider, dispatch: Dispatch) -> None:
		self._host = host
		self.theme = theme
		self._dispatch = dispatch

		self._widgets: dict[Path, _Mounted] = {}
		self._packed: dict[Path, list[str]] = {}
		self._spacers: dict[Path, tk.Frame] = {}

	# -----------------------------------------------------------------------
	# Public API
	# -----------------------------------------------------------------------

	@property
	def widget_count(self) -> int:
		return len(self._widgets)

	def widget_at(self, path: Path) -> Optional[tk.Widget]:
		mounted = self._widgets.get(path)
		return mounted.widget if mounted else None

	def widgets(self, kind: Optional[str] = None) -> list[tk.Widget]:
		return [m.widget for _, m in sorted(self._widgets.items()) if kind is None or m.kind == kind]

	def render(self, tree: Optional[Element]) -> None:
		seen: set[Path] = set()

		items: list[tuple[tk.Widget, Element]] = []
		if tree is not None:
			widget = self._place(self._host, tree, (0,), seen, self.theme.color("background"))
			items.append((widget, tree))
		self._pack_children((), self._host, items, side="top", align=None)

		for path in sorted(set(self._widgets) - seen, key=len):
			self._destroy_path(path)

	def clear(self) -> None:
		self.render(None)

	# -----------------------------------------------------------------------
	# Placement
	# -----------------------------------------------------------------------

	def _place(self, parent: tk.Misc, el: Element, path: Path, seen: set[Path], bg: str) -> tk.Widget:
		kind = str(el.kind)
		mounted = self._widgets.get(path)

		if mounted is not None and (
			mounted.kind != kind
			or mounted.widget.master is not parent
			or not mounted.widget.winfo_exists()
		):
			self._destroy_path(path)
			mounted = None

		if mounted is None:
			mounted = _Mounted(kind, self._create(parent, kind))
			self._widgets[path] = mounted

		widget = mounted.widget
		seen.add(path)

		own_bg = el.props.get("color") or bg if kind == SURFACE else bg
		self._configure(widget, el, own_bg)

		if kind in CONTAINERS:
			items = [
				(self._place(widget, child, path + (i,), seen, own_bg), child)
				for i, child in enumerate(el.children)
			]
			side = "left" if kind == ROW else "top"
			self._pack_children(path, widget, items, side=side, align=el.props.get("align"))
			self._update_spacer(path, widget, el, own_bg)

		return widget

	def _create(self, parent: tk.Misc, kind: str) -> tk.Widget:
		if kind == TEXT:
			return tk.Label(parent, anchor="w", justify="left")
		if kind == BUTTON:
			return ttk.Button(parent)
		if kind in CONTAINERS:
			return tk.Frame(parent, highlightthickness=0, bd=0)
		raise ValueError(f"Unknown element kind: {kind!r}")

	def _configure(self, widget: tk.Widget, el: Element, bg: str) -> None:
		props = el.props

		if el.kind == TEXT:
			widget.configure(
				text=props["text"],
				bg=bg,
				fg=contrast_color(bg),
				font=self.theme.font(props.get("font", "body")),
			)
		elif el.kind == BUTTON:
			style = "Outlined.TButton" if props.get("variant") == "outlined" else "TButton"
			widget.configure(
				text=props["label"],
				style=style,
				command=partial(self._click, props["on_click"]),
			)
		else:
			padx, pady = _pad(props.get("padding"))
			widget.configure(bg=bg, padx=padx, pady=pady)

	def _click(self, handler: ClickHandler) -> None:
		log.debug("Click -> %r", handler)
		self._dispatch(handler)

	# -----------------------------------------------------------------------
	# Packing
	# -----------------------------------------------------------------------

	@staticmethod
	def _pack_options(el: Element, side: str, align: Optional[str]) -> dict[str, Any]:
		props = el.props
		grow = bool(props.get("fill")) or bool(props.get("weight"))

		if side == "left":
			if grow:
				return {"side": side, "fill": "both", "expand": True}
			return {"side": side, "anchor": "n"}

		if grow:
			return {"side": side, "fill": "both", "expand": True}
		if align == "center":
			return {"side": side, "anchor": "center"}
		return {"side": side, "fill": "x"}

	def _pack_children(
		self,
		path: Path,
		container: tk.Misc,
		items: list[tuple[tk.Widget, Element]],
		*,
		side: str,
		align: Optional[str],
	) -> None:
		names = [str(w) for w, _ in items]

		if self._packed.get(path) != names:
			for slave in container.pack_slaves():
				slave.pack_forget()
			for widget, el in items:
				widget.pack(**self._pack_options(el, side, align))
			self._packed[path] = names
			return

		for widget, el in items:
			widget.pack_configure(**self._pack_options(el, side, align))

	def _update_spacer(self, path: Path, container: tk.Frame, el: Element, bg: str) -> None:
		height = int(round(float(el.props.get("padding_bottom") or 0)))
		spacer = self._spacers.get(path)

		if height < 1:
			if spacer is not None and spacer.winfo_manager():
				spacer.pack_forget()
			return

		if spacer is None or not spacer.winfo_exists():
			spacer = tk.Frame(container, highlightthickness=0, bd=0)
			self._spacers[path] = spacer

		spacer.configure(height=height, bg=bg)
		if not spacer.winfo_manager():
			spacer.pack(side="top", fill="x")

	# -----------------------------------------------------------------------
	# Teardown
	# -----------------------------------------------------------------------

	def _destroy_path(self, prefix: Path) -> None:
		n = len(prefix)

		for table in (self._widgets, self._spacers):
			for path in [p for p in table if p[:n] == prefix]:
				entry = table.pop(path)
				widget = entry.widget if isinstance(entry, _Mounted) else entry
				if widget.winfo_exists():
					widget.destroy()

		for path in [p for p in self._packed if p[:n] == prefix]:
			del self._packed[path]
