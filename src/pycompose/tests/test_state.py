# ---------------------------------------------------------------------------
# File: test_state.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for StateCell / SaveableStateCell.
#
# Notes:
#	- Pure unit tests; cells are driven by a recording tracker instead of a
#	  Composition.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pycompose.runtime.state import SaveableStateCell, StateCell


class _Owner:
	path_str = "root#0"


class _Tracker:
	def __init__(self) -> None:
		self.reads: list[StateCell] = []
		self.changes: list[StateCell] = []

	def record_read(self, cell: StateCell) -> None:
		self.reads.append(cell)

	def cell_changed(self, cell: StateCell) -> None:
		self.changes.append(cell)


def _cell(value=0):
	tracker = _Tracker()
	return StateCell(value, _Owner(), tracker, "count"), tracker


def test_value_read_is_recorded():
	cell, tracker = _cell(3)

	assert cell.value == 3
	assert tracker.reads == [cell]


def test_peek_does_not_record():
	cell, tracker = _cell(3)

	assert cell.peek() == 3
	assert tracker.reads == []


def test_set_new_value_notifies_tracker():
	cell, tracker = _cell(0)

	assert cell.set(1) is True
	assert cell.peek() == 1
	assert tracker.changes == [cell]


def test_set_equal_value_is_ignored():
	cell, tracker = _cell(5)

	assert cell.set(5) is False
	assert tracker.changes == []


def test_value_setter_and_update():
	cell, tracker = _cell(1)

	cell.value = 2
	cell.update(lambda v: v * 10)

	assert cell.peek() == 20
	assert len(tracker.changes) == 2


def test_write_after_dispose_is_a_noop():
	cell, tracker = _cell(0)
	cell.dispose()

	assert cell.disposed is True
	assert cell.set(99) is False
	assert cell.peek() == 0
	assert tracker.changes == []


def test_read_after_dispose_is_not_recorded():
	cell, tracker = _cell(7)
	cell.dispose()

	assert cell.value == 7
	assert tracker.reads == []


def test_saveable_cell_keeps_save_key():
	cell = SaveableStateCell(True, _Owner(), _Tracker(), "root#0:$0", "flag")

	assert cell.save_key == "root#0:$0"
	assert cell.peek() is True
	assert "flag" in repr(cell)
