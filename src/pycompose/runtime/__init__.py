# ---------------------------------------------------------------------------
# File: runtime/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public surface of the composition runtime.
#
# Notes:
#	- Toolkit-agnostic: nothing under pycompose.runtime imports tkinter.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .animation import (
	FAST_OUT_LINEAR_IN,
	FAST_OUT_SLOW_IN,
	LINEAR,
	LINEAR_OUT_SLOW_IN,
	AnimatedFloat,
	CubicBezierEasing,
	FloatAnimation,
	LinearEasing,
	TweenSpec,
	tween,
)
from .clock import FrameClock, ManualClock, MonotonicClock
from .composition import Composition, PassStats
from .elements import (
	Element,
	button,
	column,
	component,
	find_button,
	find_buttons,
	find_texts,
	iter_elements,
	outlined_button,
	row,
	surface,
	text,
)
from .errors import CompositionError, DuplicateKeyError, RecompositionLoopError, ScopeError
from .host import HostSession, Lifecycle
from .lazy import LazyListState, lazy_column, remember_lazy_list_state
from .node import NodeInstance, Scope
from .state import SaveableStateCell, StateCell

__all__ = [
	"AnimatedFloat",
	"Composition",
	"CompositionError",
	"CubicBezierEasing",
	"DuplicateKeyError",
	"Element",
	"FAST_OUT_LINEAR_IN",
	"FAST_OUT_SLOW_IN",
	"FloatAnimation",
	"FrameClock",
	"HostSession",
	"LINEAR",
	"LINEAR_OUT_SLOW_IN",
	"LazyListState",
	"Lifecycle",
	"LinearEasing",
	"ManualClock",
	"MonotonicClock",
	"NodeInstance",
	"PassStats",
	"RecompositionLoopError",
	"SaveableStateCell",
	"Scope",
	"ScopeError",
	"StateCell",
	"TweenSpec",
	"button",
	"column",
	"component",
	"find_button",
	"find_buttons",
	"find_texts",
	"iter_elements",
	"lazy_column",
	"outlined_button",
	"remember_lazy_list_state",
	"row",
	"surface",
	"text",
	"tween",
]
