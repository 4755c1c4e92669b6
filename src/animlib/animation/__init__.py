"""
Animation System

Fixed-bone skeleton, procedural animations and the lazily evaluating animator.
"""

from .skeleton import Skeleton
from .animations import (
    ANIMATIONS,
    AnimationFunction,
    dance_animation,
    every_beat,
    every_other_beat,
    idle_animation,
    resolve_animation,
    triangle_wave,
    wave_hello_animation,
)
from .animator import Animator

__all__ = [
    'Skeleton',
    'ANIMATIONS',
    'AnimationFunction',
    'idle_animation',
    'wave_hello_animation',
    'dance_animation',
    'resolve_animation',
    'triangle_wave',
    'every_beat',
    'every_other_beat',
    'Animator',
]
