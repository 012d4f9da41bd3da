"""Application entry point and setup for WordHunt."""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication, QIcon
from PySide6.QtWidgets import QApplication

from wordhunt.core.config import load_config
from wordhunt.core.host import HostCapabilities
from wordhunt.core.storage import JsonFileGateway
from wordhunt.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load configuration, open the saved-game store and start the main window."""
    configure_logging()
    config = load_config()

    app = QApplication(sys.argv)
    app.setApplicationName("WordHunt")
    app.setApplicationDisplayName("WordHunt")

    icon_path = Path(__file__).parent / "assets" / "logo.png"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    capabilities = HostCapabilities.from_platform_name(QGuiApplication.platformName())
    logging.info("Host platform: %s (dev build: %s)", capabilities.platform, config.dev_build)

    gateway = JsonFileGateway(config.storage_dir)
    window = MainWindow(config=config, gateway=gateway, capabilities=capabilities)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())
