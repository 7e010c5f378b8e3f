# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	pycompose: declarative, state-driven UI runtime + the "Basics" app.
#
# Notes:
#	- Kept import-free so pycompose.runtime can be used without Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
