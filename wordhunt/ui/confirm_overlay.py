"""Start-over confirmation: in-window overlay and native dialog strategies."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMessageBox, QVBoxLayout, QWidget

from wordhunt.core.confirmation import ConfirmationPrompt
from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import ModalOverlay, action_button, dialog_card


class ConfirmOverlay(ModalOverlay):
    """In-window modal with Cancel / Confirm. Clicking outside the card cancels."""

    closed = Signal(bool)  # True if the user confirmed

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        container = dialog_card("confirmContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(20, 20, 20, 20)
        content.setSpacing(10)

        self._title = QLabel()
        self._title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 20px; font-weight: 700;")
        self._title.setAlignment(Qt.AlignCenter)
        content.addWidget(self._title)

        self._message = QLabel()
        self._message.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 16px;")
        self._message.setAlignment(Qt.AlignCenter)
        self._message.setWordWrap(True)
        content.addWidget(self._message)
        content.addSpacing(10)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(15)
        self._cancel_btn = action_button("", Palette.GREY, lambda: self._finish(False), min_width=0)
        self._confirm_btn = action_button("", Palette.RED, lambda: self._finish(True), min_width=0)
        btn_row.addWidget(self._cancel_btn, 1)
        btn_row.addWidget(self._confirm_btn, 1)
        content.addLayout(btn_row)

        self.set_card(container)

    def set_prompt(self, prompt: ConfirmationPrompt) -> None:
        self._title.setText(prompt.title)
        self._message.setText(prompt.message)
        self._cancel_btn.setText(prompt.cancel_label)
        self._confirm_btn.setText(prompt.confirm_label)

    def on_scrim_clicked(self) -> None:
        self._finish(False)

    def _finish(self, confirmed: bool) -> None:
        if not self.isVisible():
            return
        self.hide()
        self.closed.emit(confirmed)


class OverlayConfirmation:
    """Presents the prompt with a :class:`ConfirmOverlay` inside the window."""

    def __init__(self, overlay: ConfirmOverlay) -> None:
        self._overlay = overlay
        self._on_result: Optional[Callable[[bool], None]] = None
        overlay.closed.connect(self._on_closed)

    def present(self, prompt: ConfirmationPrompt, on_result: Callable[[bool], None]) -> None:
        self._on_result = on_result
        self._overlay.set_prompt(prompt)
        self._overlay.open()

    def _on_closed(self, confirmed: bool) -> None:
        callback, self._on_result = self._on_result, None
        if callback is not None:
            callback(confirmed)


class NativeConfirmation:
    """Presents the prompt with a blocking platform message box."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self._parent = parent

    def present(self, prompt: ConfirmationPrompt, on_result: Callable[[bool], None]) -> None:
        box = QMessageBox(self._parent)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle(prompt.title)
        box.setText(prompt.message)
        cancel_btn = box.addButton(prompt.cancel_label, QMessageBox.ButtonRole.RejectRole)
        confirm_btn = box.addButton(prompt.confirm_label, QMessageBox.ButtonRole.DestructiveRole)
        box.setDefaultButton(cancel_btn)
        box.setEscapeButton(cancel_btn)
        box.exec()
        on_result(box.clickedButton() is confirm_btn)
