"""Declarative timed transitions.

A :class:`Timeline` is a strict sequence of :class:`Segment` objects. Each
segment wraps one step: a :class:`Tween` (animate one property to a target),
a :class:`Pause` (hold) or a :class:`Parallel` group (members start together,
the group ends with its slowest member). Segments carry a label so whoever
plays the timeline can report which stage of the sequence is active.

Nothing here owns a clock. The UI turns a timeline into Qt animation groups
(see ``wordhunt.ui.animation``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple, Union


class Easing(str, enum.Enum):
    LINEAR = "linear"
    IN_OUT = "in_out"


@dataclass(frozen=True)
class Tween:
    prop: str
    end: float
    duration: int
    easing: Easing = Easing.IN_OUT

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Tween {self.prop!r}: negative duration {self.duration}")


@dataclass(frozen=True)
class Pause:
    duration: int

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"Pause: negative duration {self.duration}")


@dataclass(frozen=True)
class Parallel:
    steps: Tuple[Union[Tween, Pause], ...]

    @property
    def duration(self) -> int:
        return max((step.duration for step in self.steps), default=0)


Step = Union[Tween, Pause, Parallel]


@dataclass(frozen=True)
class Segment:
    label: Hashable
    step: Step

    @property
    def duration(self) -> int:
        return self.step.duration

    def tweens(self) -> Tuple[Tween, ...]:
        if isinstance(self.step, Tween):
            return (self.step,)
        if isinstance(self.step, Parallel):
            return tuple(s for s in self.step.steps if isinstance(s, Tween))
        return ()


@dataclass(frozen=True)
class Timeline:
    segments: Tuple[Segment, ...]

    @property
    def duration(self) -> int:
        return sum(segment.duration for segment in self.segments)

    def labels(self) -> Tuple[Hashable, ...]:
        """Distinct labels in first-appearance order."""
        seen: list = []
        for segment in self.segments:
            if segment.label not in seen:
                seen.append(segment.label)
        return tuple(seen)

    def entry_values(self, initial: Dict[str, float]) -> List[Dict[str, float]]:
        """Property values in effect when each segment begins.

        A tween animates from the value its property holds at segment entry,
        which is the end of the last earlier tween on that property, or the
        initial value.
        """
        values = dict(initial)
        entries: List[Dict[str, float]] = []
        for segment in self.segments:
            entries.append(dict(values))
            for tween in segment.tweens():
                values[tween.prop] = tween.end
        return entries

    def final_values(self, initial: Dict[str, float]) -> Dict[str, float]:
        values = dict(initial)
        for segment in self.segments:
            for tween in segment.tweens():
                values[tween.prop] = tween.end
        return values
