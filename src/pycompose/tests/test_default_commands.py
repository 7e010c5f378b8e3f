# ---------------------------------------------------------------------------
# File: test_default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for default command registration.
#
# Notes:
#	- Handlers are driven with a stand-in app that records calls, so no Tk
#	  window is needed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial tests for default command registration
# ---------------------------------------------------------------------------

from pycompose.app.commands import CommandContext, CommandRegistry
from pycompose.app.default_commands import register_default_commands
from pycompose.app.keys import build_default_keymap


class _FakeApp:
	def __init__(self) -> None:
		self.calls: list[tuple] = []
		self.dark = False

	def quit_app(self) -> None:
		self.calls.append(("quit",))

	def toggle_dark_mode(self) -> bool:
		self.dark = not self.dark
		self.calls.append(("toggle",))
		return self.dark

	def scroll(self, delta: int) -> bool:
		self.calls.append(("scroll", delta))
		return True

	def page(self, direction: int) -> bool:
		self.calls.append(("page", direction))
		return True

	def scroll_to(self, index: int) -> bool:
		self.calls.append(("scroll_to", index))
		return True


def _registry() -> CommandRegistry:
	registry = CommandRegistry()
	register_default_commands(registry)
	return registry


def test_every_default_key_has_a_command():
	registry = _registry()

	for _, command_id in build_default_keymap().items():
		assert registry.has(command_id), command_id


def test_default_commands_call_app_methods():
	registry = _registry()
	app = _FakeApp()
	ctx = CommandContext(app)

	assert registry.invoke("app.toggle_dark_mode", ctx) is True
	registry.invoke("list.scroll_down", ctx)
	registry.invoke("list.scroll_up", ctx)
	registry.invoke("list.page_down", ctx)
	registry.invoke("list.page_up", ctx)
	registry.invoke("list.scroll_top", ctx)
	registry.invoke("app.quit", ctx)

	assert app.calls == [
		("toggle",),
		("scroll", 1),
		("scroll", -1),
		("page", 1),
		("page", -1),
		("scroll_to", 0),
		("quit",),
	]


def test_default_commands_have_labels():
	registry = _registry()

	for command_id in registry.ids():
		command = registry.get(command_id)
		assert command is not None
		assert command.label
