# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for the pycompose host app.
#
# Notes:
#	Commands give host actions (quit, theme toggle, list scrolling) one
#	invocation path for keys and tests. Handlers receive a CommandContext.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial coding / release
# 10/10/2026	pycompose maintainers		Pass CommandContext to handlers
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pycompose.core.logging import get_app_logger


log = get_app_logger("commands")


@dataclass(frozen=True, slots=True)
class CommandContext:
	"""
	What a command handler gets to work with. app is usually the Tk App;
	tests pass any object with the attributes the handler needs.
	"""
	app: Any


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[CommandContext], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (required).
	- handler:		Callable executed on invoke, given a CommandContext.
	- label:		Optional friendly label.
	- description:	Optional help text.
	- enabled:		Static enable/disable.
	- enabled_fn:	Optional callable for dynamic enablement.
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None

	enabled: bool = True
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self, ctx: CommandContext) -> bool:
		if not self.enabled:
			return False
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn(ctx))


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by id and invokes them.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def invoke(self, command_id: str, ctx: CommandContext) -> Any:
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		if not command.is_enabled(ctx):
			log.debug("Command %s is disabled", command_id)
			return None

		log.debug("Invoke %s", command_id)
		return command.handler(ctx)
