# ---------------------------------------------------------------------------
# File: greetings.py
# ---------------------------------------------------------------------------
# Description:
#	Greeting list and the expandable greeting row.
#
# Notes:
#	- greeting() keeps its own "expanded" flag. Nothing above it needs to
#	  read or control that flag, so it is not hoisted.
#	- The extra bottom padding animates between 0 and expanded_padding;
#	  a click while animating retargets from the current value.
#	- greetings() renders names through lazy_column(); rows are keyed by
#	  list position. A row scrolled out of view comes back collapsed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial coding / release
# 10/06/2026	pycompose maintainers		Animate extra padding
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Optional, Sequence

from pycompose.runtime import (
	Element,
	Scope,
	column,
	component,
	lazy_column,
	outlined_button,
	row,
	surface,
	text,
	tween,
)


DEFAULT_NAMES: tuple[str, ...] = tuple(str(i) for i in range(1000))

EXPANDED_PADDING = 48.0
TOGGLE_DURATION_MS = 2000

SHOW_MORE = "Show more"
SHOW_LESS = "Show less"


def greeting(
	scope: Scope,
	*,
	name: str,
	expanded_padding: float = EXPANDED_PADDING,
	duration_ms: float = TOGGLE_DURATION_MS,
) -> Element:
	expanded = scope.state(False, label="expanded")

	extra_padding = scope.animate_float(
		expanded_padding if expanded.value else 0.0,
		tween(duration_ms),
		label="extra_padding",
	)

	def toggle() -> None:
		expanded.value = not expanded.peek()

	return surface(
		row(
			column(
				text("Hello,"),
				text(name, font="headline"),
				weight=1,
				padding_bottom=extra_padding,
			),
			outlined_button(SHOW_LESS if expanded.value else SHOW_MORE, toggle),
			padding=24,
		),
		color=scope.theme.color("primary"),
		padding=(8, 4),
	)


@dataclass(frozen=True, slots=True)
class _GreetingRow:
	"""
	Item content for the lazy list; compares by value so an unchanged
	parent does not force every row to re-render.
	"""
	expanded_padding: float
	duration_ms: float

	def __call__(self, name: str) -> Element:
		return component(
			greeting,
			name=name,
			expanded_padding=self.expanded_padding,
			duration_ms=self.duration_ms,
		)


def greetings(
	scope: Scope,
	*,
	names: Sequence[str] = DEFAULT_NAMES,
	visible_items: int = 8,
	expanded_padding: float = EXPANDED_PADDING,
	duration_ms: float = TOGGLE_DURATION_MS,
	item_key: Optional[Callable[[str], Hashable]] = None,
) -> Element:
	return surface(
		column(
			lazy_column(
				names,
				_GreetingRow(expanded_padding, duration_ms),
				item_key=item_key,
				visible_count=visible_items,
				fill=True,
			),
			padding=(0, 4),
			fill=True,
		),
		color=scope.theme.color("background"),
		fill=True,
	)
