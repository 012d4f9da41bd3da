from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from wordhunt.core.confirmation import ConfirmationFlow
from wordhunt.core.languages import Language
from wordhunt.core.storage import GameProgress, PersistenceGateway, SavedState

logger = logging.getLogger(__name__)


class Screen(enum.Enum):
    SPLASH = "splash"
    PLAYING = "playing"
    PAUSED = "paused"
    DEVTOOLS = "devtools"


@dataclass(frozen=True)
class PlaySession:
    """Everything the Playing screen is started with."""

    language: Language
    resuming: bool
    start_level: Optional[int] = None
    reset_congratulations: bool = False


ScreenListener = Callable[[Screen, Optional[PlaySession]], None]


class SessionController:
    """Owns the active screen and the session parameters that go with it.

    Every operation returns True when it caused a transition and False when
    its precondition did not hold; a refused operation changes nothing.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        confirmation: ConfirmationFlow,
        *,
        default_language: Language = Language.EN,
        dev_build: bool = False,
    ) -> None:
        self._gateway = gateway
        self._confirmation = confirmation
        self._dev_build = dev_build
        self._screen = Screen.SPLASH
        self._language = default_language
        self._has_saved_game = False
        self._start_level: Optional[int] = None
        self._reset_congratulations = False
        self._listeners: List[ScreenListener] = []

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def language(self) -> Language:
        return self._language

    @property
    def has_saved_game(self) -> bool:
        return self._has_saved_game

    @property
    def start_level(self) -> Optional[int]:
        return self._start_level

    @property
    def reset_congratulations(self) -> bool:
        return self._reset_congratulations

    @property
    def dev_build(self) -> bool:
        return self._dev_build

    @property
    def play_session(self) -> Optional[PlaySession]:
        if self._screen is not Screen.PLAYING:
            return None
        return PlaySession(
            language=self._language,
            resuming=self._has_saved_game,
            start_level=self._start_level,
            reset_congratulations=self._reset_congratulations,
        )

    def add_listener(self, listener: ScreenListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ScreenListener) -> None:
        self._listeners.remove(listener)

    def initialize(self, debug_entry: bool = False) -> Screen:
        """Read the previous session and settle on the first screen.

        A saved game only preloads its language and enables Resume; the
        session always opens on the splash screen unless the debug entry
        asks for the dev tools.
        """
        saved = self._gateway.load_current_game_state()
        if saved is not None:
            logger.info("Found saved game (language=%s, level=%s)", saved.language.value, saved.level)
            self._language = saved.language
            self._has_saved_game = True
        else:
            logger.info("No saved game found")
            self._has_saved_game = False
        self._start_level = None
        self._reset_congratulations = False
        self._set_screen(Screen.DEVTOOLS if debug_entry else Screen.SPLASH)
        return self._screen

    def start_game(self, language: Language) -> bool:
        """Fresh start: discards the saved game and all level history."""
        if self._screen is not Screen.SPLASH:
            return self._refuse("start_game")
        self._gateway.clear_current_game_state()
        self._gateway.clear_game_progress()
        self._language = language
        self._start_level = None
        self._reset_congratulations = False
        self._has_saved_game = False
        self._set_screen(Screen.PLAYING)
        return True

    def resume_game(self) -> bool:
        if self._screen not in (Screen.SPLASH, Screen.PAUSED) or not self._has_saved_game:
            return self._refuse("resume_game")
        self._set_screen(Screen.PLAYING)
        return True

    def pause_game(self, state: Optional[SavedState] = None) -> bool:
        """Move to Paused.

        The Playing screen hands over its state so it is persisted before the
        saved-game marker is raised. Without a state the marker reflects
        whatever the gateway already holds.
        """
        if self._screen is not Screen.PLAYING:
            return self._refuse("pause_game")
        if state is not None:
            self._gateway.save_current_game_state(state)
        self._has_saved_game = self._gateway.load_current_game_state() is not None
        if not self._has_saved_game:
            logger.warning("Paused without a recoverable game state")
        self._set_screen(Screen.PAUSED)
        return True

    def new_game(self) -> bool:
        """Abandon everything and return to the title screen. Allowed from any screen."""
        self._gateway.clear_current_game_state()
        self._gateway.clear_game_progress()
        self._has_saved_game = False
        self._start_level = None
        self._reset_congratulations = False
        self._set_screen(Screen.SPLASH)
        return True

    def restart_level(self) -> bool:
        """Replay the current level from scratch, keeping level history."""
        if self._screen is not Screen.PAUSED:
            return self._refuse("restart_level")
        self._gateway.clear_current_game_state()
        self._has_saved_game = False
        self._set_screen(Screen.PLAYING)
        return True

    def play_level_again(self, level: int) -> bool:
        if self._screen not in (Screen.PAUSED, Screen.PLAYING):
            return self._refuse("play_level_again")
        self._gateway.clear_current_game_state()
        self._has_saved_game = False
        self._start_level = level
        self._reset_congratulations = True
        self._set_screen(Screen.PLAYING)
        return True

    def consume_start_level(self, level: Optional[int] = None) -> None:
        """Acknowledge the start level; the Playing screen calls this once it has read it."""
        self._start_level = level
        self._reset_congratulations = False

    def request_start_over(self) -> bool:
        if self._screen is not Screen.PAUSED:
            return self._refuse("request_start_over")
        return self._confirmation.request(self._confirmed_start_over)

    def load_history(self) -> Optional[GameProgress]:
        return self._gateway.load_game_progress()

    def enter_devtools(self) -> bool:
        if not self._dev_build or self._screen is Screen.DEVTOOLS:
            return self._refuse("enter_devtools")
        self._set_screen(Screen.DEVTOOLS)
        return True

    def exit_devtools(self) -> bool:
        if self._screen is not Screen.DEVTOOLS:
            return self._refuse("exit_devtools")
        self._has_saved_game = self._gateway.load_current_game_state() is not None
        self._set_screen(Screen.SPLASH)
        return True

    def _confirmed_start_over(self) -> None:
        # The screen may have moved on while the prompt was open.
        if self._screen is Screen.PAUSED:
            self.new_game()

    def _refuse(self, operation: str) -> bool:
        logger.debug("Ignored %s on %s (saved game: %s)", operation, self._screen.value, self._has_saved_game)
        return False

    def _set_screen(self, screen: Screen) -> None:
        logger.info("Screen %s -> %s", self._screen.value, screen.value)
        self._screen = screen
        session = self.play_session
        for listener in list(self._listeners):
            listener(screen, session)
