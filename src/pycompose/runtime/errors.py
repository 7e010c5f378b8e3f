# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exceptions raised by the composition runtime.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations


class CompositionError(RuntimeError):
	"""
	Base class for composition runtime errors.
	"""


class ScopeError(CompositionError):
	"""
	A Scope was used after its render call returned.
	"""


class DuplicateKeyError(CompositionError):
	"""
	Two sibling component elements share the same explicit key.
	"""

	def __init__(self, key: object, owner: str) -> None:
		super().__init__(f"Key {key!r} was already used by a sibling in {owner}")
		self.key = key
		self.owner = owner


class RecompositionLoopError(CompositionError):
	"""
	A pass kept producing dirty instances and never settled.
	"""

	def __init__(self, rounds: int) -> None:
		super().__init__(f"Recomposition did not settle after {rounds} rounds")
		self.rounds = rounds
