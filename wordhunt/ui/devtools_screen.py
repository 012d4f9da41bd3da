"""Developer screen: inspect and clear the persisted records."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from wordhunt.core.storage import PersistenceGateway
from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import action_button


class DevToolsScreen(QWidget):
    back_requested = Signal()

    def __init__(self, gateway: PersistenceGateway, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._gateway = gateway
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"DevToolsScreen {{ background: {Palette.BG}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        title = QLabel("Dev Tools")
        title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 24px; font-weight: 700;")
        layout.addWidget(title)

        self._dump = QPlainTextEdit()
        self._dump.setReadOnly(True)
        self._dump.setStyleSheet(
            f"background: {Palette.CARD_BG}; color: {Palette.TEXT_BODY}; font-family: monospace; font-size: 13px;"
        )
        layout.addWidget(self._dump, 1)

        buttons = QHBoxLayout()
        buttons.setSpacing(10)
        buttons.addWidget(action_button("Clear saved game", Palette.RED, self._clear_saved_game))
        buttons.addWidget(action_button("Clear progress", Palette.RED, self._clear_progress))
        buttons.addStretch(1)
        buttons.addWidget(action_button("Back to Splash", Palette.BLUE, self.back_requested.emit))
        layout.addLayout(buttons)

    def refresh(self) -> None:
        state = self._gateway.load_current_game_state()
        progress = self._gateway.load_game_progress()
        payload = {
            "current_game": None if state is None else {**asdict(state), "language": state.language.value},
            "progress": None if progress is None else asdict(progress),
        }
        self._dump.setPlainText(json.dumps(payload, indent=2))

    def _clear_saved_game(self) -> None:
        self._gateway.clear_current_game_state()
        self.refresh()

    def _clear_progress(self) -> None:
        self._gateway.clear_game_progress()
        self.refresh()

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self.refresh()
