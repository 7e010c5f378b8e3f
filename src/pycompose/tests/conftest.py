# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared pytest fixtures for pycompose tests.
#
# Notes:
#	- tk_root skips the test when no display is available.
#	- Global telemetry is restored to the disabled default after each test.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial fixtures
# 10/10/2026	pycompose maintainers		Add tk_root + app fixtures
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import pytest

from pycompose.core.telemetry import MemorySink, Telemetry, set_telemetry
from pycompose.runtime import ManualClock


@pytest.fixture(autouse=True)
def _reset_telemetry():
	yield
	set_telemetry(None)


@pytest.fixture
def clock() -> ManualClock:
	return ManualClock()


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def telemetry(sink: MemorySink) -> Telemetry:
	t = Telemetry(enabled=True, sink=sink)
	set_telemetry(t)
	return t


@pytest.fixture
def tk_root():
	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk not available: {ex}")
	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
