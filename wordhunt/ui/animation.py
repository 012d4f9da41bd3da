"""Plays a :class:`~wordhunt.core.timeline.Timeline` with Qt's animation framework."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Tuple, Union

from PySide6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QParallelAnimationGroup,
    QPauseAnimation,
    QPropertyAnimation,
    QSequentialAnimationGroup,
    QVariantAnimation,
)

from wordhunt.core.timeline import Easing, Parallel, Pause, Timeline, Tween

EASING_CURVES = {
    Easing.LINEAR: QEasingCurve.Type.Linear,
    Easing.IN_OUT: QEasingCurve.Type.InOutQuad,
}

# Qt object and property name, e.g. (opacity_effect, b"opacity").
Binding = Tuple[QObject, bytes]


def build_animation(
    timeline: Timeline,
    initial: Mapping[str, float],
    apply: Callable[[str, float], None],
    bindings: Optional[Mapping[str, Binding]] = None,
    parent: Optional[QObject] = None,
) -> QSequentialAnimationGroup:
    """Build a stopped sequential group with one child per segment.

    Child ``i`` of the group plays ``timeline.segments[i]``, so
    ``currentAnimationChanged`` plus ``indexOfAnimation`` tells the caller
    which segment is active. Properties listed in ``bindings`` are driven
    through a ``QPropertyAnimation`` on that Qt property; every other
    property is reported through ``apply(prop, value)``.
    """
    bindings = bindings or {}
    group = QSequentialAnimationGroup(parent)
    entries = timeline.entry_values(dict(initial))
    for segment, values in zip(timeline.segments, entries):
        step = segment.step
        if isinstance(step, Parallel):
            child = QParallelAnimationGroup()
            for member in step.steps:
                child.addAnimation(_leaf(member, values, apply, bindings))
        else:
            child = _leaf(step, values, apply, bindings)
        group.addAnimation(child)
    return group


def _leaf(
    step: Union[Tween, Pause],
    values: Dict[str, float],
    apply: Callable[[str, float], None],
    bindings: Mapping[str, Binding],
) -> QAbstractAnimation:
    if isinstance(step, Pause):
        return QPauseAnimation(step.duration)

    binding = bindings.get(step.prop)
    if binding is not None:
        target, name = binding
        anim: QVariantAnimation = QPropertyAnimation(target, name)
    else:
        anim = QVariantAnimation()
    anim.setDuration(step.duration)
    anim.setStartValue(float(values.get(step.prop, 0.0)))
    anim.setEndValue(float(step.end))
    anim.setEasingCurve(QEasingCurve(EASING_CURVES[step.easing]))
    if binding is None:
        # Connected last: setting the key values already emits valueChanged.
        anim.valueChanged.connect(lambda value, prop=step.prop: apply(prop, float(value)))
    return anim
