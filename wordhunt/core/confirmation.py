"""Confirmation gate for destructive actions.

The presentation is a strategy chosen once from the host capabilities: a
native blocking dialog where the platform has one, otherwise an in-window
modal overlay. Either way the flow resolves to exactly one outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from wordhunt.core.host import HostCapabilities

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmationPrompt:
    title: str = "Start Over"
    message: str = "Are you sure? All previously played levels will be lost"
    cancel_label: str = "Cancel"
    confirm_label: str = "Start Over"


START_OVER_PROMPT = ConfirmationPrompt()


class ConfirmationPresenter(Protocol):
    def present(self, prompt: ConfirmationPrompt, on_result: Callable[[bool], None]) -> None:
        """Show ``prompt`` and call ``on_result(True)`` on confirm, ``False`` on cancel."""


class ConfirmationFlow:
    def __init__(self, presenter: ConfirmationPresenter, prompt: ConfirmationPrompt = START_OVER_PROMPT) -> None:
        self._presenter = presenter
        self._prompt = prompt
        self._pending: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def presenter(self) -> ConfirmationPresenter:
        return self._presenter

    def request(self, on_confirmed: Callable[[], None]) -> bool:
        """Ask for confirmation. Returns False if a request is already pending."""
        if self._pending is not None:
            logger.debug("Confirmation already pending; ignoring request")
            return False
        self._pending = on_confirmed
        self._presenter.present(self._prompt, self._resolve)
        return True

    def _resolve(self, confirmed: bool) -> None:
        action = self._pending
        if action is None:
            return
        self._pending = None
        logger.info("Start over %s", "confirmed" if confirmed else "cancelled")
        if confirmed:
            action()


def select_presenter(
    capabilities: HostCapabilities,
    native: Callable[[], ConfirmationPresenter],
    overlay: Callable[[], ConfirmationPresenter],
) -> ConfirmationPresenter:
    if capabilities.native_dialogs:
        return native()
    return overlay()
