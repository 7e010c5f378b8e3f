# ---------------------------------------------------------------------------
# File: lazy.py
# ---------------------------------------------------------------------------
# Description:
#	Virtualized vertical list: only the visible window is composed.
#
# Notes:
#	- LazyListState holds the window (first visible index + visible count)
#	  in two StateCells; scrolling is a plain state write.
#	- Items are keyed by absolute list index, or by item_key(item) when
#	  given, so scrolling never moves state from one item to another.
#	- Window policy: items leaving the window are destroyed and their
#	  transient state reclaimed. Their saveable state is stashed in the
#	  composition's saved-state registry and restored on return.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# 10/07/2026	pycompose maintainers		Stash saveable item state on scroll-out
# 10/17/2026	pycompose maintainers		Dispose window cells with the list
# ---------------------------------------------------------------------------

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Hashable, Optional, Sequence

from pycompose.runtime.elements import Element, column, component
from pycompose.runtime.node import Scope
from pycompose.runtime.state import StateCell


ItemContent = Callable[[Any], Optional[Element]]
ItemKey = Callable[[Any], Hashable]

DEFAULT_VISIBLE_COUNT = 8


class LazyListState:
	"""
	LazyListState

	Scroll position of one lazy list. Indices are clamped to
	[0, max(0, total - visible_count)].
	"""

	def __init__(self, first_visible: StateCell[int], visible_count: StateCell[int]) -> None:
		self._first = first_visible
		self._visible = visible_count
		self.total = 0

	@property
	def first_visible_index(self) -> int:
		return self._first.value

	@property
	def visible_count(self) -> int:
		return self._visible.value

	def max_first_index(self) -> int:
		return max(0, self.total - self._visible.peek())

	def visible_range(self) -> range:
		first = min(self._first.peek(), self.max_first_index())
		return range(first, min(self.total, first + self._visible.peek()))

	def scroll_to(self, index: int) -> None:
		self._first.set(min(max(0, int(index)), self.max_first_index()))

	def scroll_by(self, delta: int) -> None:
		self.scroll_to(self._first.peek() + int(delta))

	def set_visible_count(self, count: int) -> None:
		if count < 1:
			raise ValueError(f"visible_count must be >= 1, got {count!r}")
		self._visible.set(int(count))
		self.scroll_to(self._first.peek())

	@property
	def disposed(self) -> bool:
		return self._first.disposed

	def dispose(self) -> None:
		"""
		Called when the owning list leaves the tree; later scrolls are ignored.
		"""
		self._first.dispose()
		self._visible.dispose()

	def __repr__(self) -> str:
		return (
			f"<LazyListState first={self._first.peek()} "
			f"visible={self._visible.peek()} total={self.total}>"
		)


def remember_lazy_list_state(
	scope: Scope,
	visible_count: int = DEFAULT_VISIBLE_COUNT,
	first_visible_index: int = 0,
) -> LazyListState:
	if visible_count < 1:
		raise ValueError(f"visible_count must be >= 1, got {visible_count!r}")
	return scope.remember(
		lambda: LazyListState(
			scope.mutable_state(first_visible_index, "first_visible_index"),
			scope.mutable_state(visible_count, "visible_count"),
		)
	)


def lazy_list(
	scope: Scope,
	*,
	items: Sequence[Any],
	item_content: ItemContent,
	item_key: Optional[ItemKey] = None,
	state: Optional[LazyListState] = None,
	visible_count: int = DEFAULT_VISIBLE_COUNT,
	layout: Optional[dict[str, Any]] = None,
) -> Element:
	"""
	Render function behind lazy_column().
	"""
	list_state = state if state is not None else remember_lazy_list_state(scope, visible_count)
	list_state.total = len(items)

	# Register the window cells as dependencies of this instance.
	first = min(list_state.first_visible_index, list_state.max_first_index())
	last = min(len(items), first + list_state.visible_count)

	rendered: list[Element] = []
	for index in range(first, last):
		item = items[index]
		el = item_content(item)
		if el is None:
			continue
		if el.is_component:
			key = item_key(item) if item_key is not None else index
			el = dataclasses.replace(el, key=key, retain=True)
		rendered.append(el)

	return column(*rendered, lazy=True, first_index=first, total=len(items), **(layout or {}))


def lazy_column(
	items: Sequence[Any],
	item_content: ItemContent,
	*,
	item_key: Optional[ItemKey] = None,
	state: Optional[LazyListState] = None,
	visible_count: int = DEFAULT_VISIBLE_COUNT,
	key: Any = None,
	**layout: Any,
) -> Element:
	"""
	Describe a virtualized column of items.

	item_content(item) returns the Element for one item, usually
	component(some_render_fn, ...).
	"""
	return component(
		lazy_list,
		key=key,
		items=tuple(items),
		item_content=item_content,
		item_key=item_key,
		state=state,
		visible_count=visible_count,
		layout=layout or None,
	)
