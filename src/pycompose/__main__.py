# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Entry point: python -m pycompose
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/09/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from pycompose.app import App
from pycompose.screens import my_app


def build_app(app: App) -> None:
	"""
	Attach the App Root with names and timings from config.
	"""
	cfg = app.cfg
	count = max(0, cfg.get_int("greetings.count", 1000))

	app.set_content(
		my_app,
		names=tuple(str(i) for i in range(count)),
		visible_items=max(1, cfg.get_int("greetings.visible_items", 8)),
		expanded_padding=cfg.get_float("greeting.expanded_padding", 48.0),
		duration_ms=cfg.get_float("greeting.animation_ms", 2000),
	)


def main() -> None:
	app = App()
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
