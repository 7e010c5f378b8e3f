# ---------------------------------------------------------------------------
# File: saveable.py
# ---------------------------------------------------------------------------
# Description:
#	Saved-state registry for SaveableStateCell values.
#
# Notes:
#	- Keys are instance paths plus a slot suffix, e.g. "root/greetings#0:$0".
#	- A composition consumes restored values as cells are created.
#	- Lazy list items leaving the window stash their values here until they
#	  come back; structural removal discards them.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/07/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Iterator, Mapping


_MISSING = object()


class SavedStateRegistry:
	def __init__(self, restored: Mapping[str, Any] | None = None) -> None:
		self._values: dict[str, Any] = dict(restored or {})

	def consume(self, key: str, default: Any = _MISSING) -> Any:
		"""
		Remove and return a stored value.

		Raises KeyError when absent and no default is given.
		"""
		if default is _MISSING:
			return self._values.pop(key)
		return self._values.pop(key, default)

	def stash(self, key: str, value: Any) -> None:
		self._values[key] = value

	def discard(self, key: str) -> None:
		self._values.pop(key, None)

	def discard_prefix(self, prefix: str) -> int:
		"""
		Drop every key under an instance path. Returns the number dropped.
		"""
		doomed = [k for k in self._values if k == prefix or k.startswith(prefix + "/") or k.startswith(prefix + ":")]
		for key in doomed:
			del self._values[key]
		return len(doomed)

	def snapshot(self) -> dict[str, Any]:
		return dict(self._values)

	def __contains__(self, key: object) -> bool:
		return key in self._values

	def __len__(self) -> int:
		return len(self._values)

	def __iter__(self) -> Iterator[str]:
		return iter(self._values)
