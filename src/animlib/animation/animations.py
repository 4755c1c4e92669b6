"""
Animations

Procedural animation functions. Each one maps (elapsed time, tempo, skeleton)
to a fresh local direction for every bone. Translation is never touched.
"""

from typing import Callable, Dict
import logging

import numpy as np

from ..config.settings import (
    ANIMATION_DANCE,
    ANIMATION_IDLE,
    ANIMATION_WAVE_HELLO,
    DANCE_ARM_REST_DEGREES,
    DANCE_ARM_SWING_DEGREES,
    DANCE_BODY_SWAY_DEGREES,
    DANCE_HEAD_BOB_DEGREES,
    DANCE_LEG_SWING_DEGREES,
    WAVE_AMPLITUDE_DEGREES,
    WAVE_OTHER_ARM_DEGREES,
    WAVE_PERIOD_DIVISOR_MS,
    WAVE_REST_DEGREES,
)
from .skeleton import Skeleton

logger = logging.getLogger(__name__)

# (elapsed_ms, beats_per_minute, skeleton) -> None
AnimationFunction = Callable[[float, float, Skeleton], None]


def triangle_wave(phase: float) -> float:
    """
    Triangle wave between -1 and 1 with a period of 4 phase units.

    Starts at 1 for phase 0, reaches -1 at phase 2.
    """
    return abs((phase % 4) - 2) - 1


def every_beat(elapsed_ms: float, beats_per_minute: float) -> float:
    """Triangle signal that completes one cycle per beat."""
    beats_per_ms = beats_per_minute / 60000
    return triangle_wave(elapsed_ms * beats_per_ms * 2)


def every_other_beat(elapsed_ms: float, beats_per_minute: float) -> float:
    """Triangle signal that completes one cycle every two beats."""
    beats_per_ms = beats_per_minute / 60000
    return triangle_wave(elapsed_ms * beats_per_ms)


def idle_animation(elapsed_ms: float, beats_per_minute: float, skeleton: Skeleton):
    """Rest pose: every bone at direction 0."""
    skeleton.reset_pose()


def wave_hello_animation(elapsed_ms: float, beats_per_minute: float, skeleton: Skeleton):
    """Right arm waves on a fixed period, left arm held out. Ignores tempo."""
    idle_animation(elapsed_ms, beats_per_minute, skeleton)
    wave = np.cos(elapsed_ms / WAVE_PERIOD_DIVISOR_MS)
    skeleton["right arm"].set_direction(wave * WAVE_AMPLITUDE_DEGREES + WAVE_REST_DEGREES)
    skeleton["left arm"].set_direction(WAVE_OTHER_ARM_DEGREES)


def dance_animation(elapsed_ms: float, beats_per_minute: float, skeleton: Skeleton):
    """
    Tempo-synced dance.

    Body and head rock once per beat in opposite directions; arms and legs
    swing once every two beats, mirrored left/right.
    """
    beat = every_beat(elapsed_ms, beats_per_minute)
    other_beat = every_other_beat(elapsed_ms, beats_per_minute)

    skeleton["body"].set_direction(beat * DANCE_BODY_SWAY_DEGREES)
    skeleton["head"].set_direction(beat * DANCE_HEAD_BOB_DEGREES)
    skeleton["left arm"].set_direction(other_beat * DANCE_ARM_SWING_DEGREES - DANCE_ARM_REST_DEGREES)
    skeleton["right arm"].set_direction(-other_beat * DANCE_ARM_SWING_DEGREES + DANCE_ARM_REST_DEGREES)
    skeleton["left leg"].set_direction(other_beat * DANCE_LEG_SWING_DEGREES)
    skeleton["right leg"].set_direction(-other_beat * DANCE_LEG_SWING_DEGREES)


# Menu order: the first entry is the host's default block argument
ANIMATIONS: Dict[str, AnimationFunction] = {
    ANIMATION_WAVE_HELLO: wave_hello_animation,
    ANIMATION_DANCE: dance_animation,
    ANIMATION_IDLE: idle_animation,
}


def resolve_animation(name: str) -> AnimationFunction:
    """
    Look up an animation function by name.

    Unknown names fall back to the idle animation rather than failing.
    """
    try:
        return ANIMATIONS[name]
    except (KeyError, TypeError):
        logger.debug("Unknown animation %r, falling back to %r", name, ANIMATION_IDLE)
        return idle_animation
