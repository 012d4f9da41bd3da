"""Title screen: animated intro, rules, language choice, start/resume."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSequentialAnimationGroup, Qt, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QGraphicsOpacityEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from wordhunt.core.intro import (
    AnimationStage,
    IntroGeometry,
    IntroLayout,
    IntroProperty,
    IntroSequencer,
    IntroTimings,
)
from wordhunt.core.languages import Language
from wordhunt.ui.animation import build_animation
from wordhunt.ui.colors import Palette
from wordhunt.ui.widgets import action_button

logger = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"

RULES = (
    "Build as many words as you can from the letters of the seed word.",
    "Every letter can be used as often as it appears in the seed word.",
    "Chain words quickly to keep your streak alive and earn bonus points.",
)


class SplashScreen(QWidget):
    start_requested = Signal(object)  # Language
    resume_requested = Signal()
    intro_finished = Signal()

    def __init__(self, timings: IntroTimings, geometry: IntroGeometry, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._timings = timings
        self._geometry = geometry
        self._sequencer: Optional[IntroSequencer] = None
        self._animation: Optional[QSequentialAnimationGroup] = None
        self._language = Language.EN

        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"SplashScreen {{ background: {Palette.BG}; }}")

        root = QGridLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self._build_content(), 0, 0, Qt.AlignCenter)

        self._branding = self._build_branding()

    @property
    def sequencer(self) -> Optional[IntroSequencer]:
        return self._sequencer

    @property
    def language(self) -> Language:
        return self._language

    def prepare(self, language: Language, has_saved_game: bool) -> None:
        """Seed the draft language and the resume affordance before the screen is shown."""
        self._set_language(language)
        self._resume_btn.setVisible(has_saved_game)

    def _build_branding(self) -> QWidget:
        branding = QWidget(self)
        branding.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        layout = QVBoxLayout(branding)
        layout.setAlignment(Qt.AlignCenter)
        company = QLabel()
        company_logo = _ASSETS_DIR / "company-logo.png"
        if company_logo.exists():
            company.setPixmap(QPixmap(str(company_logo)).scaledToWidth(480, Qt.SmoothTransformation))
        else:
            company.setText("LITTLE LETTERS STUDIO")
            company.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 36px; font-weight: 800;")
        company.setAlignment(Qt.AlignCenter)
        layout.addWidget(company)
        presents = QLabel("presents")
        presents.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 22px; letter-spacing: 2px;")
        presents.setAlignment(Qt.AlignCenter)
        layout.addWidget(presents)

        self._branding_effect = QGraphicsOpacityEffect(branding)
        branding.setGraphicsEffect(self._branding_effect)
        return branding

    def _build_content(self) -> QWidget:
        card = QFrame()
        card.setObjectName("splashContent")
        card.setStyleSheet(
            f"""
            QFrame#splashContent {{
                background: {Palette.CARD_BG};
                border-radius: 15px;
            }}
            """
        )
        card.setMinimumWidth(420)
        card.setMaximumWidth(640)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(0)

        self._logo_offset = QWidget()
        self._logo_offset.setFixedHeight(0)
        layout.addWidget(self._logo_offset)

        self._logo = QLabel()
        self._logo.setAlignment(Qt.AlignCenter)
        logo_path = _ASSETS_DIR / "logo.png"
        self._logo_pixmap: Optional[QPixmap] = QPixmap(str(logo_path)) if logo_path.exists() else None
        if self._logo_pixmap is None:
            self._logo.setText("WORDHUNT")
            self._logo.setStyleSheet(f"color: {Palette.ACCENT}; font-size: 48px; font-weight: 900;")
        self._logo_effect = QGraphicsOpacityEffect(self._logo)
        self._logo.setGraphicsEffect(self._logo_effect)
        layout.addWidget(self._logo)

        self._logo_gap = QWidget()
        self._logo_gap.setFixedHeight(0)
        layout.addWidget(self._logo_gap)

        self._panel = self._build_panel()
        self._panel_effect = QGraphicsOpacityEffect(self._panel)
        self._panel.setGraphicsEffect(self._panel_effect)
        layout.addWidget(self._panel)
        return card

    def _build_panel(self) -> QWidget:
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(15)

        welcome = QLabel("Welcome! Find every word hidden in the seed word.")
        welcome.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 18px;")
        welcome.setAlignment(Qt.AlignCenter)
        welcome.setWordWrap(True)
        layout.addWidget(welcome)
        layout.addSpacing(15)

        for number, text in enumerate(RULES, start=1):
            row = QHBoxLayout()
            row.setSpacing(10)
            num = QLabel(f"{number}.")
            num.setStyleSheet(f"color: {Palette.ACCENT}; font-size: 18px;")
            num.setAlignment(Qt.AlignTop)
            row.addWidget(num, 0)
            rule = QLabel(text)
            rule.setStyleSheet(f"color: {Palette.TEXT_BODY}; font-size: 16px;")
            rule.setWordWrap(True)
            row.addWidget(rule, 1)
            layout.addLayout(row)

        lang_row = QHBoxLayout()
        lang_row.setAlignment(Qt.AlignCenter)
        lang_row.setSpacing(15)
        self._english_label = QLabel(Language.EN.display_name)
        self._german_label = QLabel(Language.DE.display_name)
        self._language_toggle = QCheckBox()
        self._language_toggle.setCursor(Qt.CursorShape.PointingHandCursor)
        self._language_toggle.toggled.connect(
            lambda checked: self._set_language(Language.DE if checked else Language.EN)
        )
        lang_row.addWidget(self._english_label)
        lang_row.addWidget(self._language_toggle)
        lang_row.addWidget(self._german_label)
        layout.addSpacing(15)
        layout.addLayout(lang_row)
        layout.addSpacing(15)

        self._start_btn = action_button("Start Game", Palette.GREEN, self._emit_start, min_width=250)
        layout.addWidget(self._start_btn, 0, Qt.AlignCenter)
        self._resume_btn = action_button("Resume Game", Palette.RESUME_BLUE, self.resume_requested.emit, min_width=250)
        self._resume_btn.setVisible(False)
        layout.addWidget(self._resume_btn, 0, Qt.AlignCenter)

        self._update_language_labels()
        return panel

    def _set_language(self, language: Language) -> None:
        self._language = language
        checked = language is Language.DE
        if self._language_toggle.isChecked() != checked:
            self._language_toggle.setChecked(checked)
        self._update_language_labels()

    def _update_language_labels(self) -> None:
        for label, language in ((self._english_label, Language.EN), (self._german_label, Language.DE)):
            active = language is self._language
            color = Palette.TEXT_PRIMARY if active else Palette.TEXT_MUTED
            weight = 700 if active else 400
            label.setStyleSheet(f"color: {color}; font-size: 18px; font-weight: {weight};")

    def _emit_start(self) -> None:
        if self._sequencer is None or not self._sequencer.interactive:
            return
        self.start_requested.emit(self._language)

    # ------------------------------------------------------------------
    # Intro
    # ------------------------------------------------------------------

    def _viewport_height(self) -> int:
        window = self.window()
        return window.height() if window is not None else self.height()

    def _start_intro(self) -> None:
        layout = IntroLayout.compute(self._viewport_height(), self._geometry)
        sequencer = IntroSequencer(
            layout,
            self._timings,
            on_stage=self._on_stage,
            on_complete=self._on_intro_complete,
        )
        self._sequencer = sequencer
        initial = sequencer.initial_values()
        for prop, value in initial.items():
            self._apply_property(prop, value)
        self._panel.setEnabled(False)
        self._branding.show()
        self._branding.raise_()

        group = build_animation(
            sequencer.timeline,
            initial,
            self._apply_property,
            bindings={
                IntroProperty.BRANDING_OPACITY.value: (self._branding_effect, b"opacity"),
                IntroProperty.LOGO_OPACITY.value: (self._logo_effect, b"opacity"),
                IntroProperty.CONTENT_OPACITY.value: (self._panel_effect, b"opacity"),
            },
            parent=self,
        )
        run = sequencer.start()
        group.currentAnimationChanged.connect(
            lambda current: sequencer.enter_segment(group.indexOfAnimation(current), run)
        )
        group.finished.connect(lambda: sequencer.finish(run))
        self._animation = group
        group.start()

    def _stop_intro(self) -> None:
        if self._animation is not None:
            self._animation.stop()
            self._animation.deleteLater()
            self._animation = None
        if self._sequencer is not None:
            self._sequencer.cancel()
            self._sequencer = None

    def _on_stage(self, stage: AnimationStage) -> None:
        logger.debug("Intro stage: %s", stage.name)

    def _on_intro_complete(self) -> None:
        self._branding.hide()
        self._panel.setEnabled(True)
        self._start_btn.setFocus()
        self.intro_finished.emit()

    def _apply_property(self, prop: str, value: float) -> None:
        if prop == IntroProperty.BRANDING_OPACITY:
            self._branding_effect.setOpacity(value)
        elif prop == IntroProperty.LOGO_OPACITY:
            self._logo_effect.setOpacity(value)
        elif prop == IntroProperty.LOGO_OFFSET:
            self._logo_offset.setFixedHeight(max(0, round(value)))
        elif prop == IntroProperty.LOGO_HEIGHT:
            self._resize_logo(max(1, round(value)))
        elif prop == IntroProperty.LOGO_MARGIN:
            # Negative margins pull the panel under the logo; layouts cannot overlap.
            self._logo_gap.setFixedHeight(max(0, round(value)))
        elif prop == IntroProperty.CONTENT_OPACITY:
            self._panel_effect.setOpacity(value)

    def _resize_logo(self, height: int) -> None:
        self._logo.setFixedHeight(height)
        if self._logo_pixmap is not None and not self._logo_pixmap.isNull():
            self._logo.setPixmap(self._logo_pixmap.scaledToHeight(height, Qt.SmoothTransformation))

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._branding.setGeometry(self.rect())

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._branding.setGeometry(self.rect())
        if event.spontaneous():
            return
        self._stop_intro()
        self._start_intro()

    def hideEvent(self, event) -> None:
        if not event.spontaneous():
            self._stop_intro()
        super().hideEvent(event)
