"""Host surface for the word game while a level is being played."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from wordhunt.core.session import PlaySession
from wordhunt.core.storage import SavedState
from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import action_button

logger = logging.getLogger(__name__)


class PlayingScreen(QWidget):
    """Shows the level being played and reports pause and start-level hand-offs."""

    pause_requested = Signal(object)  # SavedState to persist before pausing
    start_level_consumed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session: Optional[PlaySession] = None
        self._level = 1
        self._payload: dict = {}

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"PlayingScreen {{ background: {Palette.BG}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        header = QHBoxLayout()
        self._title = QLabel("WordHunt")
        self._title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 24px; font-weight: 700;")
        header.addWidget(self._title, 1)
        self._level_label = QLabel()
        self._level_label.setStyleSheet("color: #E0E0E0; font-size: 18px;")
        header.addWidget(self._level_label, 0)
        header.addWidget(action_button("Pause", Palette.GREEN, self._request_pause, min_width=0), 0)
        layout.addLayout(header)

        self._placeholder = QLabel()
        self._placeholder.setAlignment(Qt.AlignCenter)
        self._placeholder.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 18px;")
        layout.addWidget(self._placeholder, 1)

    @property
    def level(self) -> int:
        return self._level

    def reset(self) -> None:
        """Forget the level; the next fresh start begins at level 1."""
        self._session = None
        self._level = 1
        self._payload = {}

    def begin(self, session: PlaySession, saved: Optional[SavedState]) -> None:
        """Start or resume play with the parameters the session controller handed over."""
        self._session = session
        self._payload = {}
        if session.start_level is not None:
            self._level = session.start_level
            self.start_level_consumed.emit()
        elif session.resuming and saved is not None:
            self._level = saved.level
            self._payload = dict(saved.payload)
        logger.info(
            "Playing level %s (language=%s, resuming=%s)", self._level, session.language.value, session.resuming
        )
        self._level_label.setText(f"Level {self._level}")
        self._placeholder.setText(f"Level {self._level} ({session.language.display_name})")

    def _request_pause(self) -> None:
        if self._session is None:
            return
        state = SavedState(language=self._session.language, level=self._level, payload=dict(self._payload))
        self.pause_requested.emit(state)
