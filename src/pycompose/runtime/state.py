# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	StateCell: observable memory owned by one RenderNode instance.
#
# Notes:
#	- Reading .value during a render registers the reader as an observer.
#	- Writing a different value marks the owner and observers dirty.
#	- Equal writes are dropped (no pass is scheduled).
#	- Writes after dispose() are ignored, so a late animation frame or a
#	  stale callback cannot resurrect a destroyed instance.
#	- Cells are created through a Scope, never directly by render code.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# 10/07/2026	pycompose maintainers		Add SaveableStateCell
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, Protocol, TypeVar

from pycompose.core.logging import get_runtime_logger

if TYPE_CHECKING:
	from pycompose.runtime.node import NodeInstance


T = TypeVar("T")

log = get_runtime_logger("state")


class CellTracker(Protocol):
	"""
	What a StateCell needs from the composition that created it.
	"""

	def record_read(self, cell: "StateCell[Any]") -> None: ...
	def cell_changed(self, cell: "StateCell[Any]") -> None: ...


class StateCell(Generic[T]):
	"""
	StateCell

	Holds one value for the lifetime of its owner instance.
	"""

	__slots__ = ("_value", "_owner", "_tracker", "_observers", "_disposed", "label")

	def __init__(
		self,
		value: T,
		owner: "NodeInstance",
		tracker: CellTracker,
		label: Optional[str] = None,
	) -> None:
		self._value = value
		self._owner = owner
		self._tracker = tracker
		self._observers: set["NodeInstance"] = set()
		self._disposed = False
		self.label = label

	# -----------------------------------------------------------------------
	# Read / write
	# -----------------------------------------------------------------------

	@property
	def value(self) -> T:
		if not self._disposed:
			self._tracker.record_read(self)
		return self._value

	@value.setter
	def value(self, new_value: T) -> None:
		self.set(new_value)

	def peek(self) -> T:
		"""
		Read without registering a dependency.
		"""
		return self._value

	def set(self, new_value: T) -> bool:
		"""
		Write a value. Returns True when the write invalidated anything.
		"""
		if self._disposed:
			log.debug("Ignoring write to disposed cell %r (owner=%s)", self, self._owner.path_str)
			return False

		if new_value == self._value:
			return False

		self._value = new_value
		self._tracker.cell_changed(self)
		return True

	def update(self, fn: Callable[[T], T]) -> bool:
		return self.set(fn(self._value))

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	@property
	def owner(self) -> "NodeInstance":
		return self._owner

	@property
	def disposed(self) -> bool:
		return self._disposed

	@property
	def observers(self) -> frozenset["NodeInstance"]:
		return frozenset(self._observers)

	def dispose(self) -> None:
		self._disposed = True
		self._observers.clear()

	def __repr__(self) -> str:
		name = self.label or self.__class__.__name__
		state = " disposed" if self._disposed else ""
		return f"<{name} value={self._value!r}{state}>"


class SaveableStateCell(StateCell[T]):
	"""
	StateCell whose value is written to the saved-state bundle.

	Survives a host configuration change (the composition is rebuilt from
	the bundle) but not structural removal of its owner.
	"""

	__slots__ = ("save_key",)

	def __init__(
		self,
		value: T,
		owner: "NodeInstance",
		tracker: CellTracker,
		save_key: str,
		label: Optional[str] = None,
	) -> None:
		super().__init__(value, owner, tracker, label)
		self.save_key = save_key
