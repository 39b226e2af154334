from __future__ import annotations

import math

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QGridLayout, QGroupBox, QLabel, QLineEdit, QPushButton, QSlider,
    QButtonGroup, QFrame,
)

from trigmaster.app.state import Store
from trigmaster.model.timeline import SLIDER_MAX, SLIDER_STEP, SPEED_CHOICES, slider_position
from trigmaster.model.trig import to_display_degrees

PLAY_TEXT = "▶  Play"
PAUSE_TEXT = "❚❚  Pause"


class PlaybackBar(QWidget):
    """Play/pause, reset and the speed selector."""
    def __init__(self, store: Store, parent: QWidget | None = None, show_speed: bool = True) -> None:
        super().__init__(parent)
        self.store = store

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)

        self.play_button = QPushButton(PLAY_TEXT, self)
        self.play_button.setMinimumWidth(110)
        self.play_button.clicked.connect(self.store.toggle_playing)
        row.addWidget(self.play_button)

        self.reset_button = QPushButton("↺", self)
        self.reset_button.setToolTip("Reset angle")
        self.reset_button.clicked.connect(self.store.reset)
        row.addWidget(self.reset_button)

        row.addStretch(1)

        self.speed_group = QButtonGroup(self)
        self.speed_group.setExclusive(True)
        self.speed_buttons: dict[float, QPushButton] = {}
        if show_speed:
            row.addWidget(QLabel("Speed", self))
            for speed in SPEED_CHOICES:
                button = QPushButton(f"{speed:g}x", self)
                button.setCheckable(True)
                button.setChecked(speed == self.store.speed)
                button.clicked.connect(lambda _=False, s=speed: self.store.set_speed(s))
                self.speed_group.addButton(button)
                self.speed_buttons[speed] = button
                row.addWidget(button)

        self.store.playing_changed.connect(self._on_playing_changed)
        self.store.speed_changed.connect(self._on_speed_changed)
        self._on_playing_changed(self.store.playing)

    @Slot(bool)
    def _on_playing_changed(self, playing: bool) -> None:
        self.play_button.setText(PAUSE_TEXT if playing else PLAY_TEXT)

    @Slot(float)
    def _on_speed_changed(self, speed: float) -> None:
        button = self.speed_buttons.get(speed)
        if button is not None:
            button.setChecked(True)


class AngleControls(QGroupBox):
    """
    Angle input: a degree field, a 0-4π slider and the playback bar.

    The degree field accepts any text; entries that are not numbers are ignored.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__("Angle control", parent)
        self.store = store

        root = QVBoxLayout(self)

        # degree input row
        top = QHBoxLayout()
        top.addStretch(1)
        top.addWidget(QLabel("Enter angle:", self))
        self.degree_input = QLineEdit(self)
        self.degree_input.setFixedWidth(80)
        self.degree_input.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.degree_input.textEdited.connect(self._on_degrees_edited)
        self.degree_input.editingFinished.connect(self._sync_degree_input)
        top.addWidget(self.degree_input)
        top.addWidget(QLabel("°", self))
        root.addLayout(top)

        # integer steps of SLIDER_STEP radians; the last step must not pass 4π
        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setRange(0, math.floor(SLIDER_MAX / SLIDER_STEP))
        self.slider.setSingleStep(1)
        self.slider.valueChanged.connect(self._on_slider_changed)
        root.addWidget(self.slider)

        ticks = QGridLayout()
        for col, (text, align) in enumerate([
            ("0°", Qt.AlignmentFlag.AlignLeft),
            ("360° (2π)", Qt.AlignmentFlag.AlignHCenter),
            ("720° (4π)", Qt.AlignmentFlag.AlignRight),
        ]):
            lab = QLabel(text, self)
            lab.setStyleSheet("color: #94a3b8; font-size: 11px;")
            ticks.addWidget(lab, 0, col, alignment=align)
        root.addLayout(ticks)

        line = QFrame(self)
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        root.addWidget(line)

        self.playback = PlaybackBar(store, self)
        root.addWidget(self.playback)

        self.store.angle_changed.connect(self._on_angle_changed)
        self._on_angle_changed(self.store.angle)

    @Slot(str)
    def _on_degrees_edited(self, text: str) -> None:
        self.store.set_degrees_text(text)

    @Slot(int)
    def _on_slider_changed(self, value: int) -> None:
        self.store.scrub_to(value * SLIDER_STEP)

    @Slot()
    def _sync_degree_input(self) -> None:
        self.degree_input.setText(str(to_display_degrees(self.store.angle)))

    @Slot(float)
    def _on_angle_changed(self, angle: float) -> None:
        self.slider.blockSignals(True)
        self.slider.setValue(round(slider_position(angle) / SLIDER_STEP))
        self.slider.blockSignals(False)

        # do not overwrite what the user is typing
        if not self.degree_input.hasFocus():
            self._sync_degree_input()
