"""
Auto-import all demo modules to ensure registration side-effects run.

After importing this package, `demos.registry.list_keys()` and `demos.registry.create_demo()`
will know about all available demos.
"""
from __future__ import annotations

import importlib
import pkgutil

from trigmaster.app.ui.figures import demos as _demos_pkg

for _module in pkgutil.iter_modules(_demos_pkg.__path__, _demos_pkg.__name__ + "."):
    importlib.import_module(_module.name)
