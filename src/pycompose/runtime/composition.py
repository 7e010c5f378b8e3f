# ---------------------------------------------------------------------------
# File: composition.py
# ---------------------------------------------------------------------------
# Description:
#	Composition: owns the tree of NodeInstances and runs update passes.
#
# Notes:
#	- Single-threaded and synchronous. One pass runs to completion before the
#	  next begins; recompose() during a pass folds into the running pass.
#	- A pass re-invokes dirty instances shallowest first. Re-invoking a
#	  parent reconciles its children right away, so children always see the
#	  final props of this pass and a parent always runs before its children.
#	- Children are re-invoked only when new, when their props changed, or
#	  when they are dirty themselves. Everything else is skipped.
#	- Writes inside batch()/dispatch() coalesce into one pass at the end.
#	  Other writes ask the host to schedule a pass (schedule hook) or wait
#	  for an explicit recompose().
#	- Running animations are sampled by frame(); the host is asked for
#	  frames through the request_frame hook.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# 10/04/2026	pycompose maintainers		Add animation frames
# 10/07/2026	pycompose maintainers		Add saved state + dispose
# 10/08/2026	pycompose maintainers		Add render_tree() + pass telemetry
# 10/17/2026	pycompose maintainers		Recover from render errors mid-pass
# ---------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from pycompose.core.logging import get_runtime_logger
from pycompose.core.telemetry import Telemetry, get_telemetry
from pycompose.core.theme import LIGHT_THEME, ThemeProvider
from pycompose.runtime.animation import AnimatedFloat
from pycompose.runtime.clock import FrameClock, MonotonicClock
from pycompose.runtime.elements import Element, RenderFn
from pycompose.runtime.errors import CompositionError, RecompositionLoopError
from pycompose.runtime.node import NodeInstance, Scope
from pycompose.runtime.reconcile import ChangeKind, reconcile, resolve_child_keys
from pycompose.runtime.saveable import SavedStateRegistry
from pycompose.runtime.state import SaveableStateCell, StateCell


T = TypeVar("T")

PassListener = Callable[["Composition"], None]
Scheduler = Callable[[Callable[[], None]], Any]

log = get_runtime_logger("composition")


@dataclass(slots=True)
class PassStats:
	invoked: int = 0
	created: int = 0
	destroyed: int = 0
	rounds: int = 0


class Composition:
	"""
	Composition

	- clock:			time source for animations.
	- theme:			read-only theme lookup exposed as scope.theme.
	- saved:			restored saved-state bundle (from save_state()).
	- schedule:			host hook; called with a callback that runs a pass.
	- request_frame:	host hook; called when an animation starts.
	"""

	MAX_ROUNDS = 100

	def __init__(
		self,
		*,
		clock: Optional[FrameClock] = None,
		theme: Optional[ThemeProvider] = None,
		saved: Optional[Mapping[str, Any]] = None,
		schedule: Optional[Scheduler] = None,
		request_frame: Optional[Callable[[], Any]] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.clock: FrameClock = clock or MonotonicClock()
		self.theme: ThemeProvider = theme or ThemeProvider(LIGHT_THEME)
		self.saved = SavedStateRegistry(saved)

		self._schedule = schedule
		self._request_frame = request_frame
		self._telemetry = telemetry

		self.root: Optional[NodeInstance] = None
		self.pass_count = 0
		self.last_pass = PassStats()

		self._dirty: set[NodeInstance] = set()
		self._reading: list[NodeInstance] = []
		self._animations: list[AnimatedFloat] = []
		self._listeners: list[PassListener] = []

		self._stats = PassStats()
		self._batch_depth = 0
		self._in_pass = False
		self._pass_scheduled = False
		self._disposed = False

	# -----------------------------------------------------------------------
	# Content
	# -----------------------------------------------------------------------

	def set_content(self, fn: RenderFn, **props: Any) -> NodeInstance:
		"""
		Attach fn as the root RenderNode and run the first pass.
		"""
		self._check_alive()

		if self.root is not None:
			self._destroy(self.root)

		key = (getattr(fn, "__qualname__", "root"), "#", 0)
		self.root = NodeInstance(fn, dict(props), key, None)
		self._stats.created += 1
		self._dirty.add(self.root)
		self.recompose()
		return self.root

	# -----------------------------------------------------------------------
	# Cells (called by Scope and StateCell)
	# -----------------------------------------------------------------------

	def new_cell(self, owner: NodeInstance, initial: T, label: Optional[str] = None) -> StateCell[T]:
		return StateCell(initial, owner, self, label)

	def new_saveable_cell(
		self,
		owner: NodeInstance,
		initial: T,
		save_key: str,
		label: Optional[str] = None,
	) -> SaveableStateCell[T]:
		value = self.saved.consume(save_key, initial)
		if value is not initial:
			log.debug("Restored %s = %r", save_key, value)
		return SaveableStateCell(value, owner, self, save_key, label)

	def record_read(self, cell: StateCell[Any]) -> None:
		if not self._reading:
			return
		reader = self._reading[-1]
		cell._observers.add(reader)
		reader.deps.add(cell)

	def cell_changed(self, cell: StateCell[Any]) -> None:
		if self._disposed:
			return

		for target in (cell.owner, *cell._observers):
			if target.alive:
				self._dirty.add(target)

		self._request_pass()

	# -----------------------------------------------------------------------
	# Scheduling
	# -----------------------------------------------------------------------

	@contextmanager
	def batch(self) -> Iterator[None]:
		"""
		Coalesce every write inside the block into a single pass.
		"""
		self._batch_depth += 1
		try:
			yield
		except BaseException:
			self._batch_depth -= 1
			# Writes made before the failure still need a pass.
			if self._batch_depth == 0 and self._dirty:
				self._request_pass()
			raise
		self._batch_depth -= 1

		if self._batch_depth == 0 and self._dirty and not self._in_pass:
			self.recompose()

	def dispatch(self, callback: Callable[..., T], *args: Any) -> T:
		"""
		Run an event callback, then one pass for everything it wrote.
		"""
		with self.batch():
			result = callback(*args)
		return result

	def _request_pass(self) -> None:
		if self._in_pass or self._batch_depth > 0:
			return
		if self._schedule is not None and not self._pass_scheduled:
			self._pass_scheduled = True
			self._schedule(self._run_scheduled_pass)

	def _run_scheduled_pass(self) -> None:
		self._pass_scheduled = False
		self.recompose()

	@property
	def has_pending_changes(self) -> bool:
		return bool(self._dirty)

	# -----------------------------------------------------------------------
	# Passes
	# -----------------------------------------------------------------------

	def recompose(self) -> int:
		"""
		Run one update pass. Returns the number of render functions invoked.
		"""
		if self._disposed or self._in_pass or not self._dirty:
			return 0

		telemetry = self._get_telemetry()
		stats = self._stats
		self._in_pass = True

		try:
			with telemetry.timer("composition.pass_ms") as timer:
				while self._dirty:
					stats.rounds += 1
					if stats.rounds > self.MAX_ROUNDS:
						self._dirty.clear()
						raise RecompositionLoopError(self.MAX_ROUNDS)

					for inst in sorted(self._dirty, key=lambda n: n.depth):
						if inst not in self._dirty:
							continue
						if inst.alive:
							self._invoke(inst)
						else:
							self._dirty.discard(inst)
		finally:
			self._in_pass = False
			self._reading.clear()
			self._stats = PassStats()

		self.pass_count += 1
		self.last_pass = stats

		telemetry.counter("composition.nodes_invoked", stats.invoked)
		telemetry.counter("composition.nodes_created", stats.created)
		telemetry.counter("composition.nodes_destroyed", stats.destroyed)

		log.debug(
			"Pass %d: invoked=%d created=%d destroyed=%d rounds=%d (%.2f ms)",
			self.pass_count,
			stats.invoked,
			stats.created,
			stats.destroyed,
			stats.rounds,
			timer.elapsed_ms,
		)

		for listener in list(self._listeners):
			listener(self)

		return stats.invoked

	def _invoke(self, inst: NodeInstance) -> None:
		self._dirty.discard(inst)

		for cell in inst.deps:
			cell._observers.discard(inst)
		inst.deps.clear()

		scope = Scope(self, inst)
		self._reading.append(inst)
		try:
			output = inst.fn(scope, **inst.props)
		except BaseException:
			# Run it again on the next pass.
			if inst.alive:
				self._dirty.add(inst)
			raise
		finally:
			self._reading.pop()
			scope.close()

		if output is not None and not isinstance(output, Element):
			raise CompositionError(
				f"{inst.name} returned {type(output).__name__}, expected Element or None"
			)

		inst.output = output
		inst.invocations += 1
		self._stats.invoked += 1

		self._reconcile_children(inst)

	def _reconcile_children(self, inst: NodeInstance) -> None:
		children: dict = {}
		child_keys: dict[int, Any] = {}

		try:
			produced = resolve_child_keys(inst.output, inst.path_str)
			for change in reconcile(inst.children, produced):
				if change.kind is ChangeKind.DESTROY:
					self._destroy(change.instance)
					continue

				el = change.element
				if change.kind is ChangeKind.CREATE:
					child = NodeInstance(el.kind, dict(el.props), change.key, inst, el.retain)
					self._stats.created += 1
					log.debug("Created %s", child.path_str)
				else:
					child = change.instance
					if change.kind is ChangeKind.UPDATE:
						child.props = dict(el.props)
						child.retain = el.retain

				# Attach before invoking so a failing child stays in the tree.
				children[change.key] = child
				child_keys[id(el)] = change.key

				if change.kind is not ChangeKind.KEEP or child in self._dirty:
					self._invoke(child)
		except BaseException:
			# Keep the children that were not reached yet and redo this
			# instance on the next pass.
			for key, child in inst.children.items():
				if child.alive and key not in children:
					children[key] = child
			if inst.alive:
				self._dirty.add(inst)
			raise
		finally:
			inst.children = children
			inst.child_keys = child_keys

	def _destroy(self, inst: NodeInstance, retain: bool = False) -> None:
		retain = retain or inst.retain

		for child in list(inst.children.values()):
			self._destroy(child, retain)
		inst.children = {}
		inst.child_keys = {}

		for cell in inst.deps:
			cell._observers.discard(inst)
		inst.deps.clear()

		for slot in inst.slots:
			if isinstance(slot, SaveableStateCell):
				if retain and not slot.disposed:
					self.saved.stash(slot.save_key, slot.peek())
				else:
					self.saved.discard(slot.save_key)

			dispose = getattr(slot, "dispose", None)
			if callable(dispose):
				dispose()

		if not retain:
			self.saved.discard_prefix(inst.path_str)

		inst.slots = []
		inst.alive = False
		self._dirty.discard(inst)
		self._stats.destroyed += 1
		log.debug("Destroyed %s%s", inst.path_str, " (state retained)" if retain else "")

	# -----------------------------------------------------------------------
	# Animation frames
	# -----------------------------------------------------------------------

	def start_animation(self, animated: AnimatedFloat) -> None:
		if animated not in self._animations:
			self._animations.append(animated)
		if self._request_frame is not None:
			self._request_frame()

	def stop_animation(self, animated: AnimatedFloat) -> None:
		if animated in self._animations:
			self._animations.remove(animated)

	@property
	def has_running_animations(self) -> bool:
		return bool(self._animations)

	def frame(self) -> bool:
		"""
		Sample every running animation at clock time, in one batch.

		Returns True while animations are still running.
		"""
		if self._disposed or not self._animations:
			return False

		now = self.clock.now_ms()
		with self.batch():
			for animated in list(self._animations):
				if not animated.tick(now):
					self.stop_animation(animated)

		return bool(self._animations)

	# -----------------------------------------------------------------------
	# Listeners
	# -----------------------------------------------------------------------

	def add_pass_listener(self, listener: PassListener) -> None:
		if listener not in self._listeners:
			self._listeners.append(listener)

	def remove_pass_listener(self, listener: PassListener) -> None:
		if listener in self._listeners:
			self._listeners.remove(listener)

	# -----------------------------------------------------------------------
	# Inspection
	# -----------------------------------------------------------------------

	def instances(self) -> list[NodeInstance]:
		if self.root is None:
			return []
		return list(self.root.iter_tree())

	def find_instances(self, fn: RenderFn) -> list[NodeInstance]:
		return [inst for inst in self.instances() if inst.fn is fn]

	def find_remembered(self, kind: type[T]) -> list[T]:
		"""
		Remembered slot objects of a given type, in tree order.
		"""
		return [slot for inst in self.instances() for slot in inst.slots if isinstance(slot, kind)]

	def render_tree(self) -> Optional[Element]:
		"""
		The current visual description with component elements inlined.
		"""
		if self.root is None:
			return None
		return self._expand(self.root)

	def _expand(self, inst: NodeInstance) -> Optional[Element]:
		if inst.output is None:
			return None
		return self._expand_element(inst, inst.output)

	def _expand_element(self, inst: NodeInstance, el: Element) -> Optional[Element]:
		if el.is_component:
			child = inst.child_for(el)
			return None if child is None else self._expand(child)

		if not el.children:
			return el

		kids = tuple(
			x for x in (self._expand_element(inst, c) for c in el.children) if x is not None
		)
		return dataclasses.replace(el, children=kids)

	# -----------------------------------------------------------------------
	# Saved state + teardown
	# -----------------------------------------------------------------------

	def save_state(self) -> dict[str, Any]:
		"""
		Snapshot every saveable value (live cells plus stashed ones).
		"""
		bundle = self.saved.snapshot()
		for slot in self.find_remembered(SaveableStateCell):
			bundle[slot.save_key] = slot.peek()
		return bundle

	def dispose(self) -> None:
		"""
		Tear down the whole tree; later writes and passes are ignored.
		"""
		if self._disposed:
			return
		if self.root is not None:
			self._destroy(self.root, retain=True)
		self._animations.clear()
		self._listeners.clear()
		self._dirty.clear()
		self._disposed = True

	@property
	def disposed(self) -> bool:
		return self._disposed

	# -----------------------------------------------------------------------
	# Internal helpers
	# -----------------------------------------------------------------------

	def _check_alive(self) -> None:
		if self._disposed:
			raise CompositionError("Composition has been disposed")

	def _get_telemetry(self) -> Telemetry:
		return self._telemetry if self._telemetry is not None else get_telemetry()

	def __repr__(self) -> str:
		root = self.root.path_str if self.root else None
		return f"<Composition root={root!r} passes={self.pass_count}>"
