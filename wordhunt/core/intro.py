"""Splash intro: branding, logo reveal, then the logo docks above the content panel."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Optional

from wordhunt.core.timeline import Parallel, Pause, Segment, Timeline, Tween

logger = logging.getLogger(__name__)


class AnimationStage(enum.Enum):
    BRANDING = 0
    LOGO_REVEAL = 1
    HOLD = 2
    TRANSITION = 3
    SETTLED = 4

    def __lt__(self, other: "AnimationStage") -> bool:
        if not isinstance(other, AnimationStage):
            return NotImplemented
        return self.value < other.value


class IntroProperty(str, enum.Enum):
    BRANDING_OPACITY = "branding_opacity"
    LOGO_OPACITY = "logo_opacity"
    LOGO_OFFSET = "logo_offset"
    LOGO_HEIGHT = "logo_height"
    LOGO_MARGIN = "logo_margin"
    CONTENT_OPACITY = "content_opacity"


@dataclass(frozen=True)
class IntroTimings:
    branding_hold_ms: int = 1200
    branding_fade_ms: int = 600
    logo_fade_ms: int = 600
    logo_hold_ms: int = 400
    dock_ms: int = 600
    content_fade_ms: int = 800

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value < 0:
                raise ValueError(f"intro.timings.{name} must not be negative (got {value})")


@dataclass(frozen=True)
class IntroGeometry:
    content_height: float = 340.0
    max_logo_height: float = 250.0
    viewport_reserve: float = 500.0
    min_logo_ratio: float = 0.1
    initial_margin: float = -60.0
    final_margin: float = 20.0


@dataclass(frozen=True)
class IntroLayout:
    """Logo placement, resolved once from the viewport at sequence start."""

    initial_offset: float
    initial_height: float
    final_height: float
    initial_margin: float
    final_margin: float

    @classmethod
    def compute(cls, viewport_height: float, geometry: IntroGeometry) -> "IntroLayout":
        minimum = max(0.0, viewport_height * geometry.min_logo_ratio)
        # The maximum wins over the ratio floor on very tall viewports.
        final_height = min(
            geometry.max_logo_height,
            max(minimum, viewport_height - geometry.viewport_reserve),
        )
        return cls(
            initial_offset=geometry.content_height / 2,
            initial_height=geometry.max_logo_height,
            final_height=final_height,
            initial_margin=geometry.initial_margin,
            final_margin=geometry.final_margin,
        )


def build_intro_timeline(timings: IntroTimings, layout: IntroLayout) -> Timeline:
    return Timeline(
        segments=(
            Segment(AnimationStage.BRANDING, Pause(timings.branding_hold_ms)),
            Segment(AnimationStage.LOGO_REVEAL, Tween(IntroProperty.BRANDING_OPACITY.value, 0.0, timings.branding_fade_ms)),
            Segment(AnimationStage.LOGO_REVEAL, Tween(IntroProperty.LOGO_OPACITY.value, 1.0, timings.logo_fade_ms)),
            Segment(AnimationStage.HOLD, Pause(timings.logo_hold_ms)),
            Segment(
                AnimationStage.TRANSITION,
                Parallel(
                    (
                        Tween(IntroProperty.LOGO_OFFSET.value, 0.0, timings.dock_ms),
                        Tween(IntroProperty.LOGO_HEIGHT.value, layout.final_height, timings.dock_ms),
                        Tween(IntroProperty.LOGO_MARGIN.value, layout.final_margin, timings.dock_ms),
                        Tween(IntroProperty.CONTENT_OPACITY.value, 1.0, timings.content_fade_ms),
                    )
                ),
            ),
        )
    )


def initial_values(layout: IntroLayout) -> Dict[str, float]:
    return {
        IntroProperty.BRANDING_OPACITY.value: 1.0,
        IntroProperty.LOGO_OPACITY.value: 0.0,
        IntroProperty.LOGO_OFFSET.value: layout.initial_offset,
        IntroProperty.LOGO_HEIGHT.value: layout.initial_height,
        IntroProperty.LOGO_MARGIN.value: layout.initial_margin,
        IntroProperty.CONTENT_OPACITY.value: 0.0,
    }


class IntroSequencer:
    """Tracks the stages of one intro run at a time.

    The sequencer owns no clock. The host plays :attr:`timeline` (see
    ``wordhunt.ui.animation``) and reports progress with
    :meth:`enter_segment` and :meth:`finish`, passing the run token that
    :meth:`start` returned. Reports for a cancelled or superseded run are
    ignored, so a torn-down screen never sees ``on_complete``.

    ``on_stage`` is called on each stage entry, ``on_complete`` exactly once
    per run when it reaches :attr:`AnimationStage.SETTLED`.
    """

    def __init__(
        self,
        layout: IntroLayout,
        timings: IntroTimings,
        on_stage: Optional[Callable[[AnimationStage], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        self._layout = layout
        self._timeline = build_intro_timeline(timings, layout)
        self._on_stage = on_stage
        self._on_complete = on_complete
        self._run = 0
        self._running = False
        self._segment = -1
        self._stage: Optional[AnimationStage] = None

    @property
    def layout(self) -> IntroLayout:
        return self._layout

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def duration(self) -> int:
        return self._timeline.duration

    @property
    def stage(self) -> Optional[AnimationStage]:
        return self._stage

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_complete(self) -> bool:
        return self._stage is AnimationStage.SETTLED

    @property
    def interactive(self) -> bool:
        """Start/resume controls may only be used once the run has settled."""
        return self.is_complete

    def initial_values(self) -> Dict[str, float]:
        return initial_values(self._layout)

    def final_values(self) -> Dict[str, float]:
        return self._timeline.final_values(self.initial_values())

    def start(self) -> int:
        """Begin (or restart) from the branding stage and return the run token."""
        self.cancel()
        self._run += 1
        self._running = True
        self._segment = -1
        self._stage = None
        run = self._run
        logger.debug("Intro run %d started", run)
        if self._timeline.segments:
            self.enter_segment(0, run)
        else:
            self.finish(run)
        return run

    def enter_segment(self, index: int, run: int) -> None:
        """Record that segment ``index`` is playing.

        Segments before ``index`` that were never reported are entered first,
        in order, so a player that jumps ahead still emits every stage. Going
        backwards is ignored.
        """
        index = min(index, len(self._timeline.segments) - 1)
        while self._accepts(run) and self._segment < index:
            self._segment += 1
            self._enter_stage(self._timeline.segments[self._segment].label)

    def finish(self, run: int) -> None:
        self.enter_segment(len(self._timeline.segments) - 1, run)
        if not self._accepts(run):
            return
        self._running = False
        self._enter_stage(AnimationStage.SETTLED)
        if run == self._run and self._on_complete is not None:
            self._on_complete()

    def cancel(self) -> None:
        if not self._running:
            return
        logger.debug("Intro run %d cancelled at stage %s", self._run, self._stage)
        self._running = False

    def _accepts(self, run: int) -> bool:
        return self._running and run == self._run

    def _enter_stage(self, label: Hashable) -> None:
        if not isinstance(label, AnimationStage) or label is self._stage:
            return
        self._stage = label
        if self._on_stage is not None:
            self._on_stage(label)
