"""
Physics Panel
=============
Three mechanisms driven by the shared angle, read here as time t = θ.

Why is this file needed?
    It lays the demos out one below another, owns the quantity toggles and
    places the explanation cards under them. The demos themselves come from
    the registry so new ones only need a module in ``figures.demos``.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton, QScrollArea, QGroupBox

import trigmaster.app.ui.figures  # noqa: F401 (registers demos)
from trigmaster.app.state import Store
from trigmaster.app.ui.figures.demos.base import DemoView
from trigmaster.app.ui.figures.demos.registry import create_demo, list_keys
from trigmaster.app.ui.panels.base import BasePanel
from trigmaster.app.ui.panels.controls import PlaybackBar
from trigmaster.app.ui.panels.visualization import make_card
from trigmaster.model.physics import (
    DISPLACEMENT_COLOR, FORCE_COLOR, VELOCITY_COLOR, DisplayToggles, Quantity,
)

logger = logging.getLogger(__name__)

QUANTITY_BUTTONS: dict[Quantity, tuple[str, str]] = {
    Quantity.DISPLACEMENT: ("Displacement x", DISPLACEMENT_COLOR),
    Quantity.VELOCITY: ("Velocity v", VELOCITY_COLOR),
    Quantity.ACCELERATION: ("Acceleration a", FORCE_COLOR),
}

SHM_TEXT = (
    "Simple harmonic motion (SHM) can be seen as the projection of uniform circular "
    "motion onto a diameter.<br><br>"
    "When a particle turns around the circle at constant angular velocity ω, its "
    "projected position y on the Y axis changes with time t as a sine function:"
    "<br><br><code style='color:#4f46e5'>y = A sin(ωt)</code>"
)

APPLICATIONS_TEXT = (
    "<ul style='margin-left:-20px'>"
    "<li><b>Spring oscillator:</b> a mass hanging on an ideal spring, as shown above.</li>"
    "<li><b>Pendulum:</b> for small swings a pendulum moves almost exactly in SHM.</li>"
    "<li><b>Alternating current:</b> mains voltage and current vary sinusoidally with time.</li>"
    "<li><b>Sound:</b> a pure tone is a sinusoidal vibration.</li>"
    "</ul>"
)


class PhysicsPanel(BasePanel):
    """Header with toggles and playback, the demos and two explanation cards."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        # ---- header ----
        header = QHBoxLayout()
        titles = QVBoxLayout()
        title = QLabel("Physics Lab", self)
        title.setStyleSheet("font-size: 20px; font-weight: bold; color: #1e293b;")
        subtitle = QLabel(
            "All systems share one time variable t (θ). Drag any chart to adjust the time.", self
        )
        subtitle.setStyleSheet("color: #64748b;")
        titles.addWidget(title)
        titles.addWidget(subtitle)
        header.addLayout(titles, 1)

        self.toggle_buttons: dict[Quantity, QPushButton] = {}
        for quantity, (text, color) in QUANTITY_BUTTONS.items():
            button = QPushButton(text, self)
            button.setCheckable(True)
            button.setStyleSheet(f"QPushButton:checked {{ color: {color}; font-weight: bold; }}")
            button.clicked.connect(lambda _=False, q=quantity: self.store.toggle_quantity(q))
            self.toggle_buttons[quantity] = button
            header.addWidget(button)

        self.playback = PlaybackBar(store, self, show_speed=False)
        header.addWidget(self.playback)
        outer.addLayout(header)

        # ---- demos and cards in a scroll area ----
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        content = QWidget(scroll)
        body = QVBoxLayout(content)

        self.demos: dict[str, DemoView] = {}
        for key in list_keys():
            view = create_demo(key, store, content)
            box = QGroupBox(view.figure.title, content)
            box_layout = QVBoxLayout(box)
            box_layout.addWidget(view)
            caption = QLabel(view.figure.caption, box)
            caption.setStyleSheet("font-family: monospace; color: #64748b;")
            box_layout.addWidget(caption)
            body.addWidget(box)
            self.demos[key] = view
            logger.debug(f"Physics demo '{key}' created.")

        cards = QHBoxLayout()
        for heading, text in (
            ("SHM and uniform circular motion", SHM_TEXT),
            ("Real-world applications", APPLICATIONS_TEXT),
        ):
            card, card_layout = make_card(content)
            head = QLabel(heading, card)
            head.setStyleSheet("font-weight: bold; color: #1e293b;")
            label = QLabel(text, card)
            label.setWordWrap(True)
            label.setStyleSheet("color: #475569;")
            card_layout.addWidget(head)
            card_layout.addWidget(label)
            card_layout.addStretch(1)
            cards.addWidget(card)
        body.addLayout(cards)
        body.addStretch(1)

        scroll.setWidget(content)
        outer.addWidget(scroll, 1)

        self.store.toggles_changed.connect(self._on_toggles_changed)
        self._on_toggles_changed(self.store.toggles)

    @Slot(object)
    def _on_toggles_changed(self, toggles: DisplayToggles) -> None:
        for quantity, button in self.toggle_buttons.items():
            button.setChecked(toggles.is_on(quantity))
