"""Pause menu."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import action_button


class PausedScreen(QWidget):
    resume_requested = Signal()
    history_requested = Signal()
    restart_level_requested = Signal()
    start_over_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"PausedScreen {{ background: {Palette.BG}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignCenter)

        title = QLabel("Game Paused")
        title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 24px; font-weight: 700;")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        text = QLabel("Your game in progress has been saved.")
        text.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 16px;")
        text.setAlignment(Qt.AlignCenter)
        layout.addWidget(text)
        layout.addSpacing(30)

        buttons = QHBoxLayout()
        buttons.setSpacing(15)
        buttons.setAlignment(Qt.AlignCenter)
        self._resume_btn = action_button("Resume Game", Palette.GREEN, self.resume_requested.emit)
        buttons.addWidget(self._resume_btn)
        buttons.addWidget(action_button("History", Palette.GREEN, self.history_requested.emit))
        buttons.addWidget(action_button("Restart Level", Palette.BLUE, self.restart_level_requested.emit))
        buttons.addWidget(action_button("Start Over", Palette.RED, self.start_over_requested.emit))
        layout.addLayout(buttons)

    def set_can_resume(self, can_resume: bool) -> None:
        self._resume_btn.setEnabled(can_resume)
