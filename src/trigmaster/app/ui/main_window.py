"""
The main window: a header with the tab bar and the function selector, and the
two panels stacked below it.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QMainWindow, QStackedWidget, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTabBar, QButtonGroup,
)

from trigmaster.app.animation import AnimationDriver
from trigmaster.app.state import Store
from trigmaster.app.ui.panels.physics import PhysicsPanel
from trigmaster.app.ui.panels.visualization import VisualizationPanel
from trigmaster.config import VISIBLE_APP_NAME, WINDOW_SIZE
from trigmaster.model.trig import TRIG_CONFIGS, TrigFunction

logger = logging.getLogger(__name__)

# Tab keys (stable), in display order
TAB_KEYS = ["visualization", "physics"]

TAB_LABELS = {
    "visualization": "Trig Visualization",
    "physics": "Physics Lab",
}


class MainWindow(QMainWindow):
    def __init__(self, start_tab: str = "visualization") -> None:
        if start_tab not in TAB_KEYS:
            raise ValueError(f"Unknown tab '{start_tab}', expected one of {TAB_KEYS}")
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Global store and the clock that drives it
        self.store = Store()
        self.animation = AnimationDriver(self.store, parent=self)

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(12, 8, 12, 12)

        # ---- header ----
        header = QHBoxLayout()
        title = QLabel(VISIBLE_APP_NAME, central)
        title.setStyleSheet("font-size: 20px; font-weight: bold; color: #4338ca;")
        header.addWidget(title)

        self.tabs = QTabBar(central)
        self.tabs.setMovable(False)
        self.tabs.setTabsClosable(False)
        self.tabs.setDrawBase(False)
        for key in TAB_KEYS:
            self.tabs.addTab(TAB_LABELS[key])
        header.addWidget(self.tabs)
        header.addStretch(1)

        self.function_group = QButtonGroup(central)
        self.function_group.setExclusive(True)
        self.function_buttons: dict[TrigFunction, QPushButton] = {}
        for func in TrigFunction:
            button = QPushButton(func.value, central)
            button.setCheckable(True)
            button.setToolTip(TRIG_CONFIGS[func].label)
            button.setStyleSheet(
                f"QPushButton:checked {{ background: {TRIG_CONFIGS[func].color}; color: white; font-weight: bold; }}"
            )
            # keep the header from jumping when the selector is hidden
            policy = button.sizePolicy()
            policy.setRetainSizeWhenHidden(True)
            button.setSizePolicy(policy)
            button.clicked.connect(lambda _=False, f=func: self.store.select_function(f))
            self.function_group.addButton(button)
            self.function_buttons[func] = button
            header.addWidget(button)
        v.addLayout(header)

        # ---- panels ----
        self.stack = QStackedWidget(central)
        self.panels = {
            "visualization": VisualizationPanel(self.store, parent=self),
            "physics": PhysicsPanel(self.store, parent=self),
        }
        for key in TAB_KEYS:
            self.stack.addWidget(self.panels[key])
        v.addWidget(self.stack, 1)

        self.setCentralWidget(central)

        self.store.function_changed.connect(self._on_function_changed)
        self._on_function_changed(self.store.function)

        self.tabs.currentChanged.connect(self._on_tab_changed)
        self.tabs.setCurrentIndex(TAB_KEYS.index(start_tab))
        self._on_tab_changed(self.tabs.currentIndex())

    def current_tab(self) -> str:
        return TAB_KEYS[self.tabs.currentIndex()]

    @Slot(int)
    def _on_tab_changed(self, idx: int) -> None:
        self.stack.setCurrentIndex(idx)
        visible = TAB_KEYS[idx] == "visualization"
        for button in self.function_buttons.values():
            button.setVisible(visible)
        logger.info(f"Switched to tab '{TAB_KEYS[idx]}'.")

    @Slot(object)
    def _on_function_changed(self, func: TrigFunction) -> None:
        self.function_buttons[func].setChecked(True)
