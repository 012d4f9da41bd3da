"""Level history overlay with a "play again" action per level."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from wordhunt.core.storage import GameProgress, LevelResult
from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import ModalOverlay, action_button, dialog_card


class HistoryOverlay(ModalOverlay):
    play_level_again = Signal(int)
    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        container = dialog_card("historyContainer", max_width=480)
        content = QVBoxLayout(container)
        content.setContentsMargins(20, 20, 20, 20)
        content.setSpacing(12)

        title = QLabel("History")
        title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 20px; font-weight: 700;")
        title.setAlignment(Qt.AlignCenter)
        content.addWidget(title)

        self._rows = QVBoxLayout()
        self._rows.setSpacing(8)
        rows_host = QWidget()
        rows_host.setLayout(self._rows)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        scroll.setStyleSheet("background: transparent;")
        scroll.setWidget(rows_host)
        scroll.setMinimumHeight(200)
        content.addWidget(scroll, 1)

        content.addWidget(action_button("Close", Palette.GREY, self._close))
        self.set_card(container)

    def show_progress(self, progress: Optional[GameProgress]) -> None:
        while self._rows.count():
            item = self._rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        results = sorted(progress.levels, key=lambda r: r.level) if progress else []
        if not results:
            empty = QLabel("No levels played yet")
            empty.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 16px;")
            empty.setAlignment(Qt.AlignCenter)
            self._rows.addWidget(empty)
        for result in results:
            self._rows.addWidget(self._row(result))
        self._rows.addStretch(1)
        self.open()

    def on_scrim_clicked(self) -> None:
        self._close()

    def _row(self, result: LevelResult) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)
        label = QLabel(
            f"Level {result.level}: {result.score} points, "
            f"{result.words_found} words, streak {result.best_streak}"
        )
        label.setStyleSheet(f"color: {Palette.TEXT_BODY}; font-size: 15px;")
        layout.addWidget(label, 1)
        level = result.level
        layout.addWidget(action_button("Play again", Palette.BLUE, lambda: self._replay(level), min_width=0))
        return row

    def _replay(self, level: int) -> None:
        self.hide()
        self.play_level_again.emit(level)

    def _close(self) -> None:
        self.hide()
        self.closed.emit()
