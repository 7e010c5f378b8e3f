# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pycompose (logging, telemetry, config).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .config import AppConfig, DEFAULTS
from .logging import init_logging, get_logger, get_app_logger, get_runtime_logger
from .telemetry import init_telemetry, get_telemetry, set_telemetry

__all__ = [
	"AppConfig",
	"DEFAULTS",
	"get_logger",
	"get_app_logger",
	"get_runtime_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
	"set_telemetry",
]
