"""Tests for wordhunt.core.intro – splash intro sequencing and layout."""

from __future__ import annotations

import pytest

from wordhunt.core.intro import (
    AnimationStage,
    IntroGeometry,
    IntroLayout,
    IntroProperty,
    IntroSequencer,
    IntroTimings,
    build_intro_timeline,
    initial_values,
)

BRANDING = IntroProperty.BRANDING_OPACITY.value
LOGO = IntroProperty.LOGO_OPACITY.value
OFFSET = IntroProperty.LOGO_OFFSET.value
HEIGHT = IntroProperty.LOGO_HEIGHT.value
MARGIN = IntroProperty.LOGO_MARGIN.value
CONTENT = IntroProperty.CONTENT_OPACITY.value

TIMINGS = IntroTimings()
# 1200 + 600 + 600 + 400 + max(600, 800)
TOTAL_MS = 3600


class Recorder:
    def __init__(self) -> None:
        self.stages: list[AnimationStage] = []
        self.completions = 0

    def on_stage(self, stage: AnimationStage) -> None:
        self.stages.append(stage)

    def on_complete(self) -> None:
        self.completions += 1


@pytest.fixture()
def layout() -> IntroLayout:
    return IntroLayout.compute(900, IntroGeometry())


@pytest.fixture()
def rec() -> Recorder:
    return Recorder()


@pytest.fixture()
def sequencer(layout: IntroLayout, rec: Recorder) -> IntroSequencer:
    return IntroSequencer(layout, TIMINGS, on_stage=rec.on_stage, on_complete=rec.on_complete)


# ===========================================================================
# IntroLayout
# ===========================================================================

class TestIntroLayout:
    def test_offset_centres_logo_over_content(self, layout: IntroLayout):
        assert layout.initial_offset == 170.0

    def test_final_height_capped_at_maximum(self):
        assert IntroLayout.compute(2000, IntroGeometry()).final_height == 250.0

    def test_final_height_from_viewport(self):
        assert IntroLayout.compute(700, IntroGeometry()).final_height == 200.0

    def test_final_height_floor_on_small_viewport(self):
        # 520 - 500 = 20 is below 10% of the viewport.
        assert IntroLayout.compute(520, IntroGeometry()).final_height == pytest.approx(52.0)

    def test_maximum_beats_floor(self):
        geometry = IntroGeometry(min_logo_ratio=0.5)
        assert IntroLayout.compute(1000, geometry).final_height == 250.0

    def test_margins_from_geometry(self, layout: IntroLayout):
        assert layout.initial_margin == -60.0
        assert layout.final_margin == 20.0


# ===========================================================================
# Timings and timeline shape
# ===========================================================================

class TestTimeline:
    def test_negative_timing_rejected(self):
        with pytest.raises(ValueError):
            IntroTimings(dock_ms=-1)

    def test_total_duration(self, layout: IntroLayout):
        assert build_intro_timeline(TIMINGS, layout).duration == TOTAL_MS

    def test_stage_order(self, layout: IntroLayout):
        labels = build_intro_timeline(TIMINGS, layout).labels()
        assert labels == (
            AnimationStage.BRANDING,
            AnimationStage.LOGO_REVEAL,
            AnimationStage.HOLD,
            AnimationStage.TRANSITION,
        )

    def test_initial_values(self, layout: IntroLayout):
        values = initial_values(layout)
        assert values[BRANDING] == 1.0
        assert values[LOGO] == 0.0
        assert values[OFFSET] == layout.initial_offset
        assert values[HEIGHT] == 250.0
        assert values[CONTENT] == 0.0

    def test_stage_enum_is_ordered(self):
        assert AnimationStage.BRANDING < AnimationStage.LOGO_REVEAL < AnimationStage.SETTLED


# ===========================================================================
# IntroSequencer – stage progression
# ===========================================================================

ALL_STAGES = [
    AnimationStage.BRANDING,
    AnimationStage.LOGO_REVEAL,
    AnimationStage.HOLD,
    AnimationStage.TRANSITION,
    AnimationStage.SETTLED,
]


class TestSequencerStages:
    def test_starts_in_branding(self, sequencer: IntroSequencer, rec: Recorder):
        sequencer.start()
        assert sequencer.stage is AnimationStage.BRANDING
        assert rec.stages == [AnimationStage.BRANDING]
        assert sequencer.is_running
        assert not sequencer.interactive

    def test_segments_map_to_stages(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        for index in range(len(sequencer.timeline.segments)):
            sequencer.enter_segment(index, run)
        assert sequencer.stage is AnimationStage.TRANSITION
        # Both logo-reveal segments report the stage once.
        assert rec.stages == ALL_STAGES[:-1]

    def test_repeated_report_is_ignored(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(0, run)
        sequencer.enter_segment(0, run)
        assert rec.stages == [AnimationStage.BRANDING]

    def test_jump_ahead_emits_skipped_stages_in_order(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(4, run)
        assert rec.stages == ALL_STAGES[:-1]

    def test_branding_never_reappears(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(3, run)
        sequencer.enter_segment(0, run)
        sequencer.enter_segment(-1, run)
        assert sequencer.stage is AnimationStage.HOLD
        assert rec.stages.count(AnimationStage.BRANDING) == 1

    def test_out_of_range_index_clamped(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(99, run)
        assert sequencer.stage is AnimationStage.TRANSITION

    def test_finish_settles(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(4, run)
        sequencer.finish(run)
        assert sequencer.stage is AnimationStage.SETTLED
        assert sequencer.is_complete
        assert sequencer.interactive
        assert not sequencer.is_running
        assert rec.completions == 1

    def test_finish_without_progress_reports_every_stage(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.finish(run)
        assert rec.stages == ALL_STAGES
        assert rec.completions == 1

    def test_settles_once_per_run(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.finish(run)
        sequencer.finish(run)
        sequencer.enter_segment(4, run)
        assert rec.stages.count(AnimationStage.SETTLED) == 1
        assert rec.completions == 1

    def test_zero_timings_still_complete(self, layout: IntroLayout, rec: Recorder):
        zero = IntroTimings(0, 0, 0, 0, 0, 0)
        sequencer = IntroSequencer(layout, zero, on_stage=rec.on_stage, on_complete=rec.on_complete)
        run = sequencer.start()
        assert sequencer.duration == 0
        sequencer.finish(run)
        assert rec.stages == ALL_STAGES

    def test_final_values(self, sequencer: IntroSequencer):
        values = sequencer.final_values()
        assert values[BRANDING] == 0.0
        assert values[LOGO] == 1.0
        assert values[OFFSET] == 0.0
        assert values[HEIGHT] == sequencer.layout.final_height
        assert values[MARGIN] == 20.0
        assert values[CONTENT] == 1.0


# ===========================================================================
# IntroSequencer – cancellation and restart
# ===========================================================================

class TestSequencerLifecycle:
    def test_cancel_suppresses_completion(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(2, run)
        sequencer.cancel()
        sequencer.enter_segment(4, run)
        sequencer.finish(run)
        assert rec.completions == 0
        assert AnimationStage.SETTLED not in rec.stages
        assert sequencer.stage is AnimationStage.LOGO_REVEAL
        assert not sequencer.is_running

    def test_cancel_before_start_is_noop(self, sequencer: IntroSequencer):
        sequencer.cancel()
        assert sequencer.stage is None
        assert not sequencer.is_running

    def test_restart_begins_at_branding(self, sequencer: IntroSequencer, rec: Recorder):
        run = sequencer.start()
        sequencer.enter_segment(3, run)
        sequencer.start()
        assert sequencer.stage is AnimationStage.BRANDING
        assert rec.stages[-1] is AnimationStage.BRANDING

    def test_restart_issues_new_token(self, sequencer: IntroSequencer):
        first = sequencer.start()
        second = sequencer.start()
        assert first != second

    def test_stale_run_is_ignored(self, sequencer: IntroSequencer, rec: Recorder):
        old = sequencer.start()
        sequencer.start()
        sequencer.enter_segment(4, old)
        sequencer.finish(old)
        assert sequencer.stage is AnimationStage.BRANDING
        assert rec.completions == 0

    def test_restart_after_settle_completes_again(self, sequencer: IntroSequencer, rec: Recorder):
        sequencer.finish(sequencer.start())
        run = sequencer.start()
        assert not sequencer.interactive
        sequencer.finish(run)
        assert rec.completions == 2

    def test_restart_from_stage_callback_drops_old_completion(self, layout: IntroLayout, rec: Recorder):
        holder: dict = {}

        def on_stage(stage: AnimationStage) -> None:
            rec.on_stage(stage)
            if stage is AnimationStage.SETTLED and not holder.get("restarted"):
                holder["restarted"] = True
                holder["sequencer"].start()

        sequencer = IntroSequencer(layout, TIMINGS, on_stage=on_stage, on_complete=rec.on_complete)
        holder["sequencer"] = sequencer
        sequencer.finish(sequencer.start())
        assert rec.completions == 0
        assert sequencer.stage is AnimationStage.BRANDING

    def test_layout_fixed_for_instance(self, sequencer: IntroSequencer):
        before = sequencer.layout
        sequencer.finish(sequencer.start())
        assert sequencer.layout is before
