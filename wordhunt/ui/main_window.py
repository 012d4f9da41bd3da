from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QPushButton, QStackedWidget, QWidget

from wordhunt.core.config import AppConfig
from wordhunt.core.confirmation import ConfirmationFlow, select_presenter
from wordhunt.core.host import HostCapabilities, devtools_requested
from wordhunt.core.languages import Language
from wordhunt.core.session import PlaySession, Screen, SessionController
from wordhunt.core.storage import PersistenceGateway, SavedState
from wordhunt.ui.colors import Palette
from wordhunt.ui.confirm_overlay import ConfirmOverlay, NativeConfirmation, OverlayConfirmation
from wordhunt.ui.devtools_screen import DevToolsScreen
from wordhunt.ui.history_overlay import HistoryOverlay
from wordhunt.ui.paused_screen import PausedScreen
from wordhunt.ui.playing_screen import PlayingScreen
from wordhunt.ui.splash_screen import SplashScreen
from wordhunt.ui.widgets import action_button

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Application window: one stacked page per screen, driven by :class:`SessionController`.

    The window never changes pages on its own. Widgets forward user actions
    to the controller and the controller's screen listener switches pages.
    """

    def __init__(
        self,
        config: AppConfig,
        gateway: PersistenceGateway,
        capabilities: HostCapabilities,
    ) -> None:
        super().__init__()
        self._gateway = gateway

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)
        self.setStyleSheet(f"QMainWindow {{ background: {Palette.BG}; }}")

        self._confirm_overlay = ConfirmOverlay(self._stack)
        presenter = select_presenter(
            capabilities,
            native=lambda: NativeConfirmation(self),
            overlay=lambda: OverlayConfirmation(self._confirm_overlay),
        )
        logger.info("Confirmation strategy: %s", type(presenter).__name__)

        self._controller = SessionController(
            gateway,
            ConfirmationFlow(presenter),
            default_language=config.default_language,
            dev_build=config.dev_build,
        )

        self._splash = SplashScreen(config.intro_timings, config.intro_geometry)
        self._playing = PlayingScreen()
        self._paused = PausedScreen()
        self._devtools = DevToolsScreen(gateway)
        self._pages: dict[Screen, QWidget] = {
            Screen.SPLASH: self._splash,
            Screen.PLAYING: self._playing,
            Screen.PAUSED: self._paused,
            Screen.DEVTOOLS: self._devtools,
        }
        for page in self._pages.values():
            self._stack.addWidget(page)

        self._history_overlay = HistoryOverlay(self._stack)
        self._dev_button: Optional[QPushButton] = None

        self._connect_signals()
        self._controller.add_listener(self._on_screen_changed)
        self._build_dev_button()

        debug_entry = devtools_requested(config.startup_query, capabilities)
        self._controller.initialize(debug_entry=debug_entry)

    def _connect_signals(self) -> None:
        c = self._controller
        self._splash.start_requested.connect(self._on_start_requested)
        self._splash.resume_requested.connect(c.resume_game)

        self._playing.pause_requested.connect(self._on_pause_requested)
        self._playing.start_level_consumed.connect(lambda: c.consume_start_level())

        self._paused.resume_requested.connect(c.resume_game)
        self._paused.history_requested.connect(self._show_history)
        self._paused.restart_level_requested.connect(c.restart_level)
        self._paused.start_over_requested.connect(c.request_start_over)

        self._history_overlay.play_level_again.connect(c.play_level_again)
        self._devtools.back_requested.connect(c.exit_devtools)

    def _build_dev_button(self) -> None:
        """Persistent Dev Tools shortcut, only in non-production builds."""
        if not self._controller.dev_build:
            return
        btn = action_button("Dev Tools", Palette.DEV_PURPLE, self._controller.enter_devtools, min_width=0)
        btn.setParent(self)
        btn.adjustSize()
        self._dev_button = btn
        self._place_dev_button()

    def _place_dev_button(self) -> None:
        if self._dev_button is None:
            return
        btn = self._dev_button
        btn.move(self.width() - btn.width() - 20, self.height() - btn.height() - 40)
        btn.setVisible(self._controller.screen is not Screen.DEVTOOLS)
        btn.raise_()

    def _on_start_requested(self, language: Language) -> None:
        self._controller.start_game(language)

    def _on_pause_requested(self, state: SavedState) -> None:
        self._controller.pause_game(state)

    def _show_history(self) -> None:
        self._history_overlay.show_progress(self._controller.load_history())

    def _on_screen_changed(self, screen: Screen, session: Optional[PlaySession]) -> None:
        self._history_overlay.hide()
        if screen is Screen.SPLASH:
            self._playing.reset()
            self._splash.prepare(self._controller.language, self._controller.has_saved_game)
        elif screen is Screen.PLAYING and session is not None:
            saved = self._gateway.load_current_game_state() if session.resuming else None
            self._playing.begin(session, saved)
        elif screen is Screen.PAUSED:
            self._paused.set_can_resume(self._controller.has_saved_game)
        self._stack.setCurrentWidget(self._pages[screen])
        self._place_dev_button()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._place_dev_button()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing on screen %s", self._controller.screen.value)
        super().closeEvent(event)
