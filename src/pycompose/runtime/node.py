# ---------------------------------------------------------------------------
# File: node.py
# ---------------------------------------------------------------------------
# Description:
#	NodeInstance (a live RenderNode in the composition tree) and Scope (the
#	handle a render function receives).
#
# Notes:
#	- An instance is identified by its path: the chain of child keys from
#	  the root. Keys are (function name, "#", ordinal) for unkeyed elements
#	  and (function name, "@", key) for keyed ones.
#	- Remembered slots are positional: a render function must call
#	  remember/state/saveable_state/animate_float in the same order on every
#	  invocation (no calls inside conditionals or loops of varying length).
#	- A Scope is only valid while its render call is running.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# 10/04/2026	pycompose maintainers		Add animate_float to Scope
# 10/07/2026	pycompose maintainers		Add saveable_state to Scope
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, TypeVar

from pycompose.runtime.animation import AnimatedFloat, TweenSpec
from pycompose.runtime.elements import Element, RenderFn
from pycompose.runtime.errors import ScopeError
from pycompose.runtime.state import StateCell

if TYPE_CHECKING:
	from pycompose.core.theme import ThemeProvider
	from pycompose.runtime.composition import Composition


T = TypeVar("T")

ChildKey = tuple[str, str, Any]


def format_key(key: ChildKey) -> str:
	name, tag, value = key
	return f"{name}{tag}{value}"


class NodeInstance:
	"""
	NodeInstance

	- fn/props:		the render function and the props it was last invoked with.
	- slots:		remembered objects, in call order.
	- deps:			cells read during the last invocation.
	- children:		child instances by key, in output order.
	- output:		the Element returned by the last invocation.
	"""

	def __init__(
		self,
		fn: RenderFn,
		props: dict[str, Any],
		key: ChildKey,
		parent: Optional["NodeInstance"],
		retain: bool = False,
	) -> None:
		self.fn = fn
		self.props = props
		self.key = key
		self.parent = parent
		self.retain = retain

		self.depth: int = 0 if parent is None else parent.depth + 1
		self.path: tuple[ChildKey, ...] = (key,) if parent is None else parent.path + (key,)
		self.path_str = "/".join(format_key(k) for k in self.path)

		self.slots: list[Any] = []
		self.deps: set[StateCell[Any]] = set()
		self.children: dict[ChildKey, NodeInstance] = {}
		self.child_keys: dict[int, ChildKey] = {}
		self.output: Optional[Element] = None

		self.alive = True
		self.invocations = 0

	@property
	def name(self) -> str:
		return getattr(self.fn, "__qualname__", repr(self.fn))

	def child_for(self, element: Element) -> Optional["NodeInstance"]:
		"""
		The child instance a component element in self.output resolved to.

		None when the pass that produced the output failed before reaching it.
		"""
		key = self.child_keys.get(id(element))
		return None if key is None else self.children.get(key)

	def iter_tree(self) -> Iterator["NodeInstance"]:
		yield self
		for child in self.children.values():
			yield from child.iter_tree()

	def __repr__(self) -> str:
		state = "" if self.alive else " destroyed"
		return f"<NodeInstance {self.path_str}{state}>"


class Scope:
	"""
	Scope

	Passed as the first argument to every render function.
	"""

	def __init__(self, composition: "Composition", instance: NodeInstance) -> None:
		self._composition = composition
		self._instance = instance
		self._cursor = 0
		self._open = True

	# -----------------------------------------------------------------------
	# Context
	# -----------------------------------------------------------------------

	@property
	def instance(self) -> NodeInstance:
		return self._instance

	@property
	def theme(self) -> "ThemeProvider":
		return self._composition.theme

	def now_ms(self) -> float:
		return self._composition.clock.now_ms()

	# -----------------------------------------------------------------------
	# Remembered slots
	# -----------------------------------------------------------------------

	def remember(self, factory: Callable[[], T]) -> T:
		"""
		Return the object created by factory on the first invocation.
		"""
		self._check_open()
		slots = self._instance.slots
		index = self._cursor
		self._cursor += 1

		if index < len(slots):
			return slots[index]

		value = factory()
		slots.append(value)
		return value

	def mutable_state(self, initial: T, label: Optional[str] = None) -> StateCell[T]:
		"""
		Create a cell owned by this instance without remembering it.

		Meant for use inside remember() factories.
		"""
		self._check_open()
		return self._composition.new_cell(self._instance, initial, label)

	def state(self, initial: T, label: Optional[str] = None) -> StateCell[T]:
		return self.remember(lambda: self.mutable_state(initial, label))

	def saveable_state(self, initial: T, label: Optional[str] = None) -> StateCell[T]:
		"""
		Like state(), but the value survives a host configuration change.
		"""
		self._check_open()
		save_key = f"{self._instance.path_str}:${self._cursor}"
		return self.remember(
			lambda: self._composition.new_saveable_cell(self._instance, initial, save_key, label)
		)

	def animate_float(
		self,
		target: float,
		spec: Optional[TweenSpec] = None,
		label: Optional[str] = None,
	) -> float:
		"""
		Return a value that animates toward target whenever target changes.

		The first invocation starts at target with no animation.
		"""
		animated = self.animated_float(target, spec, label)
		animated.animate_to(float(target), self.now_ms(), spec)
		return animated.value

	def animated_float(
		self,
		initial: float,
		spec: Optional[TweenSpec] = None,
		label: Optional[str] = None,
	) -> AnimatedFloat:
		"""
		Return the remembered AnimatedFloat holder itself.
		"""
		return self.remember(
			lambda: AnimatedFloat(
				self.mutable_state(float(initial), label),
				spec or TweenSpec(),
				self._composition,
			)
		)

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _check_open(self) -> None:
		if not self._open:
			raise ScopeError(f"Scope of {self._instance.path_str} used outside its render call")

	def close(self) -> None:
		self._open = False
