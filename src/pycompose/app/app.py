# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	Tk host for pycompose: window, theme, keys and the HostSession.
#
# Notes:
#	- Passes are scheduled with after_idle(); animation frames run on a
#	  fixed after() interval (frame.interval_ms) while any are running.
#	- Toggling dark mode is a configuration change: saveable state comes
#	  back, transient state (expanded rows, scroll position) does not.
#	- Closing the window ends the session.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial coding / release
# 10/10/2026	pycompose maintainers		Add command + keymap ownership
# 10/11/2026	pycompose maintainers		Mouse wheel + resize drive the lazy list
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Mapping, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pycompose.app.commands import CommandContext, CommandRegistry
from pycompose.app.default_commands import register_default_commands
from pycompose.app.keys import build_default_keymap
from pycompose.core.config import AppConfig
from pycompose.core.logging import get_app_logger, init_logging
from pycompose.core.telemetry import init_telemetry
from pycompose.core.theme import ThemeProvider
from pycompose.runtime.clock import FrameClock
from pycompose.runtime.composition import Composition
from pycompose.runtime.elements import RenderFn
from pycompose.runtime.host import HostSession
from pycompose.runtime.lazy import LazyListState
from pycompose.ui.composition_view import CompositionView


class App(tk.Tk):
	"""
	App

	Root window. Owns the HostSession and the view that displays it.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: AppConfig | Mapping[str, Any] | None = None,
		*,
		clock: Optional[FrameClock] = None,
	) -> None:
		super().__init__()

		self.cfg = cfg if isinstance(cfg, AppConfig) else AppConfig.from_env(cfg)

		init_logging(self.cfg)
		self.log = get_app_logger("app")
		self.telemetry = init_telemetry(self.cfg, get_app_logger("telemetry"))

		self.title_text = title or str(self.cfg.get("title", "Basics"))
		self.title(self.title_text)

		self.frame_interval_ms = max(1, self.cfg.get_int("frame.interval_ms", 16))
		self.item_height = max(1, self.cfg.get_int("greetings.item_height", 88))

		self._frame_job: Optional[str] = None
		self._closed = False

		# -------------------------------------------------------------------
		# Theme
		# -------------------------------------------------------------------

		self.style = ThemedStyle(self)
		self.theme = ThemeProvider.for_mode(self.cfg.get_bool("theme.dark"))
		self._apply_style()

		# -------------------------------------------------------------------
		# Command + keymap
		# -------------------------------------------------------------------

		self.commands = CommandRegistry()
		register_default_commands(self.commands)
		self.keymap = build_default_keymap()

		# -------------------------------------------------------------------
		# Session + view
		# -------------------------------------------------------------------

		self.session = HostSession(
			clock=clock,
			theme=self.theme,
			schedule=self._schedule_pass,
			request_frame=self._request_frame,
			telemetry=self.telemetry,
		)

		# Ensure Tk has computed screen dimensions
		self.update_idletasks()

		self._apply_geometry(
			width if width is not None else self.cfg.get_int("window.width"),
			height if height is not None else self.cfg.get_int("window.height"),
		)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.view = CompositionView(name="content")
		self.view.mount(self.root_frame)
		self.view.layout()
		self.view.attach(self.session)

		self.keymap.install(self, self.invoke)
		self._bind_mousewheel()
		self.bind("<Configure>", self._on_configure, add="+")
		self.protocol("WM_DELETE_WINDOW", self.quit_app)

		self.log.info("App started (%s, %s theme)", self.title_text, self.theme.theme.name)

	# -----------------------------------------------------------------------
	# Content
	# -----------------------------------------------------------------------

	@property
	def composition(self) -> Optional[Composition]:
		return self.session.composition

	def set_content(self, fn: RenderFn, **props: Any) -> Composition:
		return self.session.set_content(fn, **props)

	# -----------------------------------------------------------------------
	# Commands
	# -----------------------------------------------------------------------

	def invoke(self, command_id: str) -> Any:
		return self.commands.invoke(command_id, CommandContext(self))

	def toggle_dark_mode(self) -> bool:
		"""
		Switch light/dark. Returns True when dark is now active.
		"""
		self.theme = self.theme.toggled()
		self._apply_style()

		if self.session.composition is None:
			self.session.theme = self.theme
		else:
			self.session.configuration_changed(self.theme)

		self.view.refresh()
		self.log.info("Theme switched to %s", self.theme.theme.name)
		return self.theme.is_dark

	def list_state(self) -> Optional[LazyListState]:
		composition = self.session.composition
		if composition is None or composition.disposed:
			return None
		states = composition.find_remembered(LazyListState)
		return states[0] if states else None

	def scroll(self, delta: int) -> bool:
		state = self.list_state()
		if state is None or self.session.composition is None:
			return False
		self.session.composition.dispatch(state.scroll_by, delta)
		return True

	def scroll_to(self, index: int) -> bool:
		state = self.list_state()
		if state is None or self.session.composition is None:
			return False
		self.session.composition.dispatch(state.scroll_to, index)
		return True

	def page(self, direction: int) -> bool:
		state = self.list_state()
		if state is None:
			return False
		step = max(1, state.visible_count - 1)
		return self.scroll(step if direction > 0 else -step)

	def quit_app(self) -> None:
		if self._closed:
			return
		self._closed = True

		if self._frame_job is not None:
			self.after_cancel(self._frame_job)
			self._frame_job = None

		self.session.destroy()
		self.view.destroy()
		self.log.info("App closed")
		self.destroy()

	# -----------------------------------------------------------------------
	# Host hooks
	# -----------------------------------------------------------------------

	def _schedule_pass(self, callback: Any) -> None:
		if not self._closed:
			self.after_idle(callback)

	def _request_frame(self) -> None:
		if self._closed or self._frame_job is not None:
			return
		self._frame_job = self.after(self.frame_interval_ms, self._on_frame)

	def _on_frame(self) -> None:
		self._frame_job = None
		composition = self.session.composition
		if composition is not None and composition.frame():
			self._request_frame()

	# -----------------------------------------------------------------------
	# Window & input
	# -----------------------------------------------------------------------

	def _apply_style(self) -> None:
		self.style.set_theme(self.theme.theme.ttk_theme)
		self.style.configure(
			"Outlined.TButton",
			foreground=self.theme.color("primary"),
			background=self.theme.color("surface"),
			font=self.theme.font("button"),
		)
		self.configure(bg=self.theme.color("background"))

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		if width is None and height is None:
			win_w = screen_w
			win_h = screen_h
		else:
			req_w = width if width is not None else screen_w
			req_h = height if height is not None else screen_h

			win_w = max(1, min(req_w, screen_w))
			win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	def _bind_mousewheel(self) -> None:
		def _on_mousewheel(event: tk.Event) -> None:
			delta = getattr(event, "delta", 0)
			if delta:
				self.scroll(-1 if delta > 0 else 1)

		self.bind_all("<MouseWheel>", _on_mousewheel)
		self.bind_all("<Button-4>", lambda _e: self.scroll(-1))
		self.bind_all("<Button-5>", lambda _e: self.scroll(1))

	def _on_configure(self, event: tk.Event) -> None:
		if event.widget is not self:
			return
		state = self.list_state()
		if state is None or self.session.composition is None:
			return

		count = max(1, int(event.height) // self.item_height)
		if count != state.visible_count:
			self.session.composition.dispatch(state.set_visible_count, count)

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
