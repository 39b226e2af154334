from __future__ import annotations

from PySide6.QtWidgets import QWidget

from trigmaster.app.state import Store
from trigmaster.app.ui.figures.demos.base import DemoView

_REGISTRY: dict[str, type[DemoView]] = {}


def register_demo(cls: type[DemoView]) -> type[DemoView]:
    """Class decorator to register a demo by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_demo(key: str, store: Store, parent: QWidget | None = None) -> DemoView:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No demo registered for key '{key}'")
    return cls(store, parent)


def list_keys() -> list[str]:
    """Registered demo keys in display order."""
    return sorted(_REGISTRY, key=lambda k: _REGISTRY[k].ORDER)
