"""Test the physics demo registry.

Run:
    pytest tests/test_registry.py -v
"""

import pytest

import trigmaster.app.ui.figures  # noqa: F401
from trigmaster.app.ui.figures.demos.base import DemoView
from trigmaster.app.ui.figures.demos.registry import create_demo, list_keys, register_demo


def test_all_demos_registered_in_order():
    assert list_keys() == ["spring", "circular", "pendulum"]


def test_create_demo(store, track):
    view = track(create_demo("pendulum", store))
    assert isinstance(view, DemoView)
    assert view.figure.title == "Simple Pendulum"


def test_create_unknown_demo(store):
    with pytest.raises(KeyError, match="No demo registered"):
        create_demo("rocket", store)


def test_register_requires_key():
    class Nameless(DemoView):
        KEY = ""

    with pytest.raises(ValueError, match="must define KEY"):
        register_demo(Nameless)
