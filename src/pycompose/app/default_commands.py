# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for the pycompose host app.
#
# Notes:
#	- Handlers only call public App methods (quit_app, toggle_dark_mode,
#	  scroll, scroll_to, page), so tests can drive them with a stand-in.
#	- List commands are no-ops while no lazy list is on screen.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial coding / release
# 10/10/2026	pycompose maintainers		Add list scrolling commands
# ---------------------------------------------------------------------------

from __future__ import annotations

from pycompose.app.commands import Command, CommandContext, CommandRegistry


def register_default_commands(registry: CommandRegistry) -> None:
	def _app_quit(ctx: CommandContext) -> None:
		ctx.app.quit_app()

	def _toggle_dark(ctx: CommandContext) -> bool:
		return ctx.app.toggle_dark_mode()

	def _scroll_down(ctx: CommandContext) -> bool:
		return ctx.app.scroll(1)

	def _scroll_up(ctx: CommandContext) -> bool:
		return ctx.app.scroll(-1)

	def _page_down(ctx: CommandContext) -> bool:
		return ctx.app.page(1)

	def _page_up(ctx: CommandContext) -> bool:
		return ctx.app.page(-1)

	def _scroll_top(ctx: CommandContext) -> bool:
		return ctx.app.scroll_to(0)

	registry.register(Command(
		id="app.quit",
		label="Quit",
		description="Close the window and end the session.",
		handler=_app_quit,
	))

	registry.register(Command(
		id="app.toggle_dark_mode",
		label="Toggle dark mode",
		description="Switch theme; saveable state survives the rebuild.",
		handler=_toggle_dark,
	))

	registry.register(Command(
		id="list.scroll_down",
		label="Scroll down",
		handler=_scroll_down,
	))

	registry.register(Command(
		id="list.scroll_up",
		label="Scroll up",
		handler=_scroll_up,
	))

	registry.register(Command(
		id="list.page_down",
		label="Page down",
		handler=_page_down,
	))

	registry.register(Command(
		id="list.page_up",
		label="Page up",
		handler=_page_up,
	))

	registry.register(Command(
		id="list.scroll_top",
		label="Scroll to top",
		handler=_scroll_top,
	))
