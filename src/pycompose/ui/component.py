# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base Tk Component for pycompose hosts.
#
# Notes:
#	- A Component owns one root widget built by build() and placed by
#	  layout(). Subclasses override build() and, when needed, redraw().
#	- Components are long-lived Tk containers (the window chrome); the
#	  content inside them is described by the composition runtime.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:		stable identifier for lookup/debugging/tests (auto-generated).
	- name:		human-friendly label (defaults to class name).
	- pack:		options passed to pack() by the default layout().
	"""
	id: Optional[str] = None
	name: Optional[str] = None
	pack: dict[str, Any] = field(default_factory=lambda: {"fill": "both", "expand": True})

	# tk.Misc is the common base for Tk, Toplevel, and all widgets.
	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(**self.pack)

	def redraw(self) -> None:
		if self.root is not None:
			self.root.update_idletasks()

	def destroy(self) -> None:
		if self.root is not None:
			self.root.destroy()
			self.root = None
