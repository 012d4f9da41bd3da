"""Shared widgets: modal overlay base, dialog card, action buttons."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QPushButton,
    QSizePolicy,
    QWidget,
)

from wordhunt.ui.colors import Palette, button_style


def dialog_card(object_name: str, radius: int = 10, max_width: int = 400) -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(320)
    container.setMaximumWidth(max_width)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {Palette.DIALOG_BG};
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 0, 0, 120))
    container.setGraphicsEffect(shadow)
    return container


def action_button(text: str, color: str, on_click: Callable[[], None], min_width: int = 120) -> QPushButton:
    btn = QPushButton(text)
    btn.setStyleSheet(button_style(color))
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setMinimumWidth(min_width)
    btn.clicked.connect(lambda checked=False: on_click())
    return btn


class ModalOverlay(QWidget):
    """Scrim that covers its parent and swallows input until hidden.

    Subclasses add their card with :meth:`set_card`. Clicking the scrim calls
    :meth:`on_scrim_clicked`.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self._layout.setRowStretch(0, 1)
        self._layout.setColumnStretch(0, 1)

        scrim = QWidget(self)
        scrim.setStyleSheet(f"background: {Palette.SCRIM};")
        scrim.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        scrim.setCursor(Qt.CursorShape.ArrowCursor)
        scrim.setMinimumSize(1, 1)
        scrim.mousePressEvent = lambda e: self.on_scrim_clicked()
        self._layout.addWidget(scrim, 0, 0)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.hide()

    def set_card(self, card: QWidget) -> None:
        self._layout.addWidget(card, 0, 0, 1, 1, Qt.AlignCenter)

    def on_scrim_clicked(self) -> None:
        pass

    def open(self) -> None:
        self._update_geometry()
        self.raise_()
        self.show()
        self.setFocus()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def keyPressEvent(self, event) -> None:
        # Keys must not reach the screen underneath while the overlay is open.
        event.accept()

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
