# ---------------------------------------------------------------------------
# File: elements.py
# ---------------------------------------------------------------------------
# Description:
#	Element: the visual description returned by render functions.
#
# Notes:
#	- An Element is either a primitive (kind is a str such as "text") or a
#	  component element (kind is a render function). Component elements
#	  become child NodeInstances; primitives are handed to the renderer.
#	- Elements are immutable values; render functions build fresh ones on
#	  every invocation.
#	- Primitive kinds: text, button, column, row, surface.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# 10/08/2026	pycompose maintainers		Add query helpers for tests + host
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional, Union


RenderFn = Callable[..., Optional["Element"]]
ClickHandler = Callable[[], Any]

TEXT = "text"
BUTTON = "button"
COLUMN = "column"
ROW = "row"
SURFACE = "surface"

PRIMITIVES = frozenset({TEXT, BUTTON, COLUMN, ROW, SURFACE})


@dataclass(frozen=True, slots=True)
class Element:
	"""
	Element

	- kind:		primitive name or render function.
	- props:	keyword properties (component props or layout/content props).
	- children:	nested elements (primitives only).
	- key:		optional explicit identity among siblings (component elements).
	- retain:	saveable state of this instance is stashed, not discarded,
				when it leaves the tree (lazy list items).
	"""
	kind: Union[str, RenderFn]
	props: Mapping[str, Any] = field(default_factory=dict)
	children: tuple["Element", ...] = ()
	key: Any = None
	retain: bool = False

	@property
	def is_component(self) -> bool:
		return not isinstance(self.kind, str)

	@property
	def name(self) -> str:
		if isinstance(self.kind, str):
			return self.kind
		return getattr(self.kind, "__qualname__", repr(self.kind))

	def __repr__(self) -> str:
		key = f" key={self.key!r}" if self.key is not None else ""
		return f"<Element {self.name}{key} props={dict(self.props)!r} children={len(self.children)}>"


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _kids(children: tuple[Optional[Element], ...]) -> tuple[Element, ...]:
	return tuple(c for c in children if c is not None)


def text(value: str, **props: Any) -> Element:
	return Element(TEXT, {"text": str(value), **props})


def button(label: str, on_click: ClickHandler, **props: Any) -> Element:
	props.setdefault("variant", "filled")
	return Element(BUTTON, {"label": str(label), "on_click": on_click, **props})


def outlined_button(label: str, on_click: ClickHandler, **props: Any) -> Element:
	return button(label, on_click, variant="outlined", **props)


def column(*children: Optional[Element], **props: Any) -> Element:
	return Element(COLUMN, props, _kids(children))


def row(*children: Optional[Element], **props: Any) -> Element:
	return Element(ROW, props, _kids(children))


def surface(*children: Optional[Element], color: Optional[str] = None, **props: Any) -> Element:
	return Element(SURFACE, {"color": color, **props}, _kids(children))


def component(fn: RenderFn, *, key: Any = None, **props: Any) -> Element:
	"""
	Describe a child RenderNode; the composition instantiates it.
	"""
	if not callable(fn):
		raise TypeError(f"component() expects a render function, got {fn!r}")
	return Element(fn, props, (), key)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def iter_elements(tree: Optional[Element]) -> Iterator[Element]:
	"""
	Depth-first walk, parents before children.
	"""
	if tree is None:
		return
	stack = [tree]
	while stack:
		el = stack.pop()
		yield el
		stack.extend(reversed(el.children))


def find_texts(tree: Optional[Element]) -> list[str]:
	return [el.props["text"] for el in iter_elements(tree) if el.kind == TEXT]


def find_buttons(tree: Optional[Element], label: Optional[str] = None) -> list[Element]:
	return [
		el for el in iter_elements(tree)
		if el.kind == BUTTON and (label is None or el.props["label"] == label)
	]


def find_button(tree: Optional[Element], label: str) -> Element:
	found = find_buttons(tree, label)
	if not found:
		raise LookupError(f"No button labelled {label!r}")
	return found[0]
