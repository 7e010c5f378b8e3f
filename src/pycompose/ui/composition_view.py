# ---------------------------------------------------------------------------
# File: composition_view.py
# ---------------------------------------------------------------------------
# Description:
#	CompositionView: Tk component that displays a HostSession.
#
# Notes:
#	- Re-renders after every completed pass (pass listener on the session).
#	- Button clicks are routed through Composition.dispatch(), so every
#	  write a click handler makes lands in a single pass.
#	- Clicks that arrive after the session was torn down are dropped.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/08/2026	pycompose maintainers		Initial coding / release
# 10/09/2026	pycompose maintainers		Re-apply theme on configuration change
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import tkinter as tk

from pycompose.core.logging import get_app_logger
from pycompose.core.theme import ThemeProvider
from pycompose.runtime.composition import Composition
from pycompose.runtime.elements import ClickHandler
from pycompose.runtime.host import HostSession
from pycompose.ui.component import Component
from pycompose.ui.renderer import TkRenderer


log = get_app_logger("view")


@dataclass
class CompositionView(Component):
	"""
	CompositionView

	Mount it, then attach() a HostSession.
	"""
	session: Optional[HostSession] = field(default=None, init=False)
	renderer: Optional[TkRenderer] = field(default=None, init=False)
	renders: int = field(default=0, init=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = tk.Frame(parent, highlightthickness=0, bd=0)
		self.renderer = TkRenderer(frame, ThemeProvider.for_mode(False), self.dispatch)
		return frame

	def attach(self, session: HostSession) -> None:
		if self.root is None or self.renderer is None:
			raise RuntimeError("CompositionView must be mounted before attach()")

		self.session = session
		session.add_pass_listener(self._on_pass)
		self.refresh()

	def dispatch(self, handler: ClickHandler) -> Any:
		session = self.session
		if session is None or session.composition is None or session.composition.disposed:
			log.debug("Dropping click; no live composition")
			return None
		return session.composition.dispatch(handler)

	def refresh(self) -> None:
		"""
		Render the session's current tree now.
		"""
		if self.root is None or self.renderer is None:
			return

		session = self.session
		if session is None or session.composition is None:
			self.renderer.clear()
			return

		self._render(session.composition)

	def redraw(self) -> None:
		self.refresh()
		super().redraw()

	def destroy(self) -> None:
		self.session = None
		self.renderer = None
		super().destroy()

	def _on_pass(self, composition: Composition) -> None:
		# Runs for the first pass of a rebuilt composition too, before the
		# session has switched over to it.
		if self.session is None or composition.disposed:
			return
		self._render(composition)

	def _render(self, composition: Composition) -> None:
		if self.root is None or self.renderer is None:
			return

		theme = composition.theme
		self.renderer.theme = theme
		self.root.configure(bg=theme.color("background"))
		self.renderer.render(composition.render_tree())
		self.renders += 1
