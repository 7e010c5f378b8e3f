# ---------------------------------------------------------------------------
# File: test_reconcile.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for keyed child reconciliation.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	pycompose maintainers		Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pycompose.runtime import DuplicateKeyError, column, component, row, text
from pycompose.runtime.node import NodeInstance
from pycompose.runtime.reconcile import ChangeKind, component_elements, reconcile, resolve_child_keys


def leaf(scope, *, label):
	return text(label)


def other(scope):
	return None


def _make_item():
	def item(scope):
		return None
	return item


def _instances(produced):
	return {key: NodeInstance(el.kind, dict(el.props), key, None) for key, el in produced}


def test_component_elements_skip_primitives_and_keep_order():
	a = component(leaf, label="a")
	b = component(other)
	output = column(text("x"), row(a), b)

	assert component_elements(output) == [a, b]
	assert component_elements(None) == []


def test_unkeyed_children_get_per_name_ordinals():
	produced = resolve_child_keys(column(
		component(leaf, label="a"),
		component(other),
		component(leaf, label="b"),
	))

	keys = [key for key, _ in produced]
	assert keys == [
		(leaf.__qualname__, "#", 0),
		(other.__qualname__, "#", 0),
		(leaf.__qualname__, "#", 1),
	]


def test_keyed_children_use_their_key():
	produced = resolve_child_keys(column(component(leaf, key="x", label="a")))

	assert produced[0][0] == (leaf.__qualname__, "@", "x")


def test_duplicate_keys_raise():
	output = column(
		component(leaf, key=1, label="a"),
		component(leaf, key=1, label="b"),
	)

	with pytest.raises(DuplicateKeyError):
		resolve_child_keys(output, "parent#0")


def test_reconcile_keep_update_create_destroy():
	before = resolve_child_keys(column(
		component(leaf, key="keep", label="same"),
		component(leaf, key="update", label="old"),
		component(leaf, key="gone", label="bye"),
	))
	previous = _instances(before)

	after = resolve_child_keys(column(
		component(leaf, key="keep", label="same"),
		component(leaf, key="update", label="new"),
		component(leaf, key="new", label="hi"),
	))

	changes = reconcile(previous, after)
	kinds = {change.key[2]: change.kind for change in changes}

	assert kinds == {
		"gone": ChangeKind.DESTROY,
		"keep": ChangeKind.KEEP,
		"update": ChangeKind.UPDATE,
		"new": ChangeKind.CREATE,
	}
	assert changes[0].kind is ChangeKind.DESTROY


def test_reconcile_replaces_a_different_function_with_the_same_name():
	first, second = _make_item(), _make_item()
	assert first.__qualname__ == second.__qualname__

	previous = _instances(resolve_child_keys(column(component(first))))
	changes = reconcile(previous, resolve_child_keys(column(component(second))))

	assert [c.kind for c in changes] == [ChangeKind.DESTROY, ChangeKind.CREATE]


def test_reconcile_retain_change_is_an_update():
	produced = resolve_child_keys(column(component(leaf, key=0, label="a")))
	previous = _instances(produced)

	key, el = produced[0]
	retained = [(key, el.__class__(el.kind, el.props, el.children, el.key, True))]

	changes = reconcile(previous, retained)
	assert changes[0].kind is ChangeKind.UPDATE
