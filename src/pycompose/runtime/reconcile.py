# ---------------------------------------------------------------------------
# File: reconcile.py
# ---------------------------------------------------------------------------
# Description:
#	Keyed child reconciliation for NodeInstances.
#
# Notes:
#	- Compares the children an instance had with the component elements its
#	  new output contains, by key, and returns one ChildChange per child.
#	- Pure functions: nothing here creates, invokes or destroys instances.
#	- Removed keys are destroyed first, then the produced children follow in
#	  output order.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/03/2026	pycompose maintainers		Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from pycompose.runtime.elements import Element
from pycompose.runtime.errors import DuplicateKeyError
from pycompose.runtime.node import ChildKey, NodeInstance


class ChangeKind(Enum):
	KEEP = "keep"
	UPDATE = "update"
	CREATE = "create"
	DESTROY = "destroy"


@dataclass(frozen=True, slots=True)
class ChildChange:
	kind: ChangeKind
	key: ChildKey
	element: Optional[Element] = None
	instance: Optional[NodeInstance] = None


def component_elements(output: Optional[Element]) -> list[Element]:
	"""
	Component elements of an output, in order, without descending into them.
	"""
	found: list[Element] = []
	if output is None:
		return found

	stack = [output]
	while stack:
		el = stack.pop()
		if el.is_component:
			found.append(el)
		else:
			stack.extend(reversed(el.children))
	return found


def resolve_child_keys(output: Optional[Element], owner: str = "?") -> list[tuple[ChildKey, Element]]:
	ordinals: dict[str, int] = {}
	seen: set[ChildKey] = set()
	resolved: list[tuple[ChildKey, Element]] = []

	for el in component_elements(output):
		name = el.name
		if el.key is not None:
			key: ChildKey = (name, "@", el.key)
			if key in seen:
				raise DuplicateKeyError(el.key, owner)
		else:
			n = ordinals.get(name, 0)
			ordinals[name] = n + 1
			key = (name, "#", n)

		seen.add(key)
		resolved.append((key, el))

	return resolved


def reconcile(
	previous: Mapping[ChildKey, NodeInstance],
	produced: list[tuple[ChildKey, Element]],
) -> list[ChildChange]:
	wanted = {key for key, _ in produced}

	changes = [
		ChildChange(ChangeKind.DESTROY, key, instance=inst)
		for key, inst in previous.items()
		if key not in wanted
	]

	for key, el in produced:
		inst = previous.get(key)

		if inst is None:
			changes.append(ChildChange(ChangeKind.CREATE, key, element=el))
		elif inst.fn is not el.kind:
			# Same name, different function: replace.
			changes.append(ChildChange(ChangeKind.DESTROY, key, instance=inst))
			changes.append(ChildChange(ChangeKind.CREATE, key, element=el))
		elif inst.props == dict(el.props) and inst.retain == el.retain:
			changes.append(ChildChange(ChangeKind.KEEP, key, element=el, instance=inst))
		else:
			changes.append(ChildChange(ChangeKind.UPDATE, key, element=el, instance=inst))

	return changes
