"""Tests for wordhunt.ui.main_window – window construction and the first page."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordhunt.core.config import AppConfig
from wordhunt.core.host import HostCapabilities
from wordhunt.core.intro import IntroGeometry, IntroTimings
from wordhunt.core.languages import Language
from wordhunt.core.storage import MemoryGateway, SavedState


@pytest.fixture()
def window(qt_app, tmp_path: Path):
    from wordhunt.ui.main_window import MainWindow

    config = AppConfig(
        intro_timings=IntroTimings(),
        intro_geometry=IntroGeometry(),
        storage_dir=tmp_path,
        default_language=Language.EN,
    )
    w = MainWindow(
        config=config,
        gateway=MemoryGateway(state=SavedState(language=Language.DE)),
        capabilities=HostCapabilities.from_platform_name("offscreen"),
    )
    yield w
    w.close()
    w.deleteLater()


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_constructor_does_not_show_window(self, qt_app, window):
        qt_app.processEvents()
        assert not window.isVisible()

    def test_opens_on_splash(self, window):
        from wordhunt.ui.splash_screen import SplashScreen

        assert isinstance(window.centralWidget().currentWidget(), SplashScreen)

    def test_splash_seeded_from_saved_game(self, window):
        assert window.centralWidget().currentWidget().language is Language.DE
