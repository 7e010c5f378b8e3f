# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key mapping for the pycompose host (Tk key sequence -> command id).
#
# Notes:
#	- KeyMap itself is plain data; install() is the only Tk-facing part
#	  and only needs an object with bind()/unbind().
#	- build_default_keymap() holds the app's default shortcuts.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial coding / release
# 10/10/2026	pycompose maintainers		Add install() + default keymap
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


DEFAULT_BINDINGS: tuple[tuple[str, str], ...] = (
	("<Control-q>", "app.quit"),
	("<Control-t>", "app.toggle_dark_mode"),
	("<Down>", "list.scroll_down"),
	("<Up>", "list.scroll_up"),
	("<Next>", "list.page_down"),
	("<Prior>", "list.page_up"),
	("<Home>", "list.scroll_top"),
)


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of key sequences (e.g., "<Control-q>") to command ids (e.g., "app.quit").
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		if not overwrite and keyseq in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[keyseq] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(keyseq, None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(keyseq)

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()

	def install(self, widget: Any, on_command: Callable[[str], Any]) -> list[str]:
		"""
		Bind every key sequence on widget; events call on_command(command_id).

		Returns the sequences bound. The handler returns "break" so Tk does
		not also run class bindings for the key.
		"""
		bound: list[str] = []
		for keyseq, command_id in self.items():
			def _handler(_event: Any, command_id: str = command_id) -> str:
				on_command(command_id)
				return "break"

			widget.bind(keyseq, _handler)
			bound.append(keyseq)
		return bound


def build_default_keymap() -> KeyMap:
	keymap = KeyMap()
	for keyseq, command_id in DEFAULT_BINDINGS:
		keymap.bind(keyseq, command_id)
	return keymap
