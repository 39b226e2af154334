from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame

from trigmaster.app.state import Store
from trigmaster.app.ui.figures.unit_circle import UnitCircleView
from trigmaster.app.ui.figures.wave_graph import WaveGraphView
from trigmaster.app.ui.panels.base import BasePanel
from trigmaster.app.ui.panels.controls import AngleControls
from trigmaster.model.trig import TRIG_CONFIGS, TrigFunction, value_expression

HINT_TEXT = (
    "Hint: watch how the colored line on the unit circle changes with the angle θ "
    "and is projected onto the graph on the right."
)

CARD_STYLE = "QFrame#card { background: white; border: 1px solid #e2e8f0; border-radius: 10px; }"


def make_card(parent: QWidget | None = None) -> tuple[QFrame, QVBoxLayout]:
    """A white rounded frame used for the explanation texts."""
    card = QFrame(parent)
    card.setObjectName("card")
    card.setStyleSheet(CARD_STYLE)
    layout = QVBoxLayout(card)
    layout.setContentsMargins(16, 14, 16, 14)
    return card, layout


class VisualizationPanel(BasePanel):
    """Unit circle on the left, the function graph and the angle controls on the right."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QHBoxLayout(self)
        root.setSpacing(16)

        # ---- left column ----
        left = QVBoxLayout()
        self.unit_circle = UnitCircleView(store, self)
        left.addWidget(self.unit_circle, 1)

        self.value_label = QLabel(self)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.value_label.setStyleSheet("font-family: monospace; font-size: 15px; font-weight: bold;")
        left.addWidget(self.value_label)

        card, card_layout = make_card(self)
        self.card_title = QLabel(card)
        self.card_title.setStyleSheet("font-size: 16px; font-weight: 600; color: #1e293b;")
        self.card_description = QLabel(card)
        self.card_description.setWordWrap(True)
        self.card_description.setStyleSheet("color: #475569;")
        hint = QLabel(HINT_TEXT, card)
        hint.setWordWrap(True)
        hint.setStyleSheet("color: #94a3b8; font-size: 11px;")
        card_layout.addWidget(self.card_title)
        card_layout.addWidget(self.card_description)
        card_layout.addWidget(hint)
        left.addWidget(card)

        root.addLayout(left, 1)

        # ---- right column ----
        right = QVBoxLayout()
        self.wave_graph = WaveGraphView(store, self)
        right.addWidget(self.wave_graph, 1)

        self.controls = AngleControls(store, self)
        right.addWidget(self.controls)

        root.addLayout(right, 1)

        self.store.angle_changed.connect(self._update_texts)
        self.store.function_changed.connect(self._on_function_changed)
        self._on_function_changed(self.store.function)

    @Slot(object)
    def _on_function_changed(self, func: TrigFunction) -> None:
        config = TRIG_CONFIGS[func]
        self.card_title.setText(config.label)
        self.card_description.setText(config.description)
        self.value_label.setStyleSheet(
            f"font-family: monospace; font-size: 15px; font-weight: bold; color: {config.color};"
        )
        self._update_texts()

    def _update_texts(self, *_) -> None:
        self.value_label.setText(value_expression(self.store.function, self.store.angle))
