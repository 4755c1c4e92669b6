"""
Animator

Owns animation selection and tempo, and evaluates the active animation
whenever a bone attribute is read.
"""

from __future__ import annotations

from typing import Callable, Optional
import logging
import threading

from ..config.settings import (
    ATTRIBUTE_DIRECTION,
    ATTRIBUTE_NAMES,
    ATTRIBUTE_X_POSITION,
    DEFAULT_ANIMATION,
    DEFAULT_TEMPO_BPM,
)
from ..core.clock import monotonic_ms
from ..core.transform2d import Transform2D
from ..errors import UnknownAttributeError
from .animations import resolve_animation
from .skeleton import Skeleton

logger = logging.getLogger(__name__)


class Animator:
    """
    Drives a skeleton with procedural animations.

    Manages:
    - Current animation name and the time it was started
    - Tempo for beat-driven animations
    - Per-bone offsets (local translation)

    Poses are evaluated lazily: every attribute read re-runs the current
    animation over all bones at "now" before composing world transforms.
    There is no background tick, so a read never sees a stale pose.
    """

    def __init__(
        self,
        skeleton: Optional[Skeleton] = None,
        clock: Callable[[], float] = monotonic_ms,
        tempo: float = DEFAULT_TEMPO_BPM,
        animation: str = DEFAULT_ANIMATION,
    ):
        """
        Initialize animator and start the default animation.

        Args:
            skeleton: Skeleton to animate (a fresh one if None)
            clock: Zero-argument callable returning "now" in milliseconds
            tempo: Initial tempo in beats per minute
            animation: Animation started at construction
        """
        self.skeleton = skeleton if skeleton is not None else Skeleton()
        self.clock = clock
        self.tempo = tempo

        self.current_animation: str = animation
        self.start_time: float = 0.0

        # Reads mutate every bone, so they share the writers' lock
        self._lock = threading.RLock()

        self.start_animation(animation)

    def start_animation(self, name: str):
        """
        Switch to an animation and restart its clock.

        The name is stored as given; unknown names play as idle.

        Args:
            name: Animation name
        """
        with self._lock:
            self.start_time = self.clock()
            self.current_animation = name
        logger.debug("Started animation %r at %.1f ms", name, self.start_time)

    def set_tempo(self, beats_per_minute: float):
        """
        Set tempo for beat-driven animations.

        Not validated: zero freezes and negative values reverse tempo-driven motion.
        """
        with self._lock:
            self.tempo = beats_per_minute
        logger.debug("Tempo set to %s BPM", beats_per_minute)

    def set_bone_offset(self, bone_name: str, x: float, y: float):
        """
        Set a bone's local translation.

        Animations only write rotation, so the offset survives evaluations
        and animation switches.
        """
        with self._lock:
            self.skeleton.get_bone(bone_name).set_translation(x, y)
        logger.debug("Offset of %r set to (%s, %s)", bone_name, x, y)

    def get_current_animation_name(self) -> str:
        """Get the stored animation name, even if it plays as idle."""
        return self.current_animation

    def get_elapsed_time(self, now: Optional[float] = None) -> float:
        """Milliseconds since the current animation was started."""
        if now is None:
            now = self.clock()
        return now - self.start_time

    def update(self, now: Optional[float] = None):
        """
        Evaluate the current animation over every bone.

        Args:
            now: Timestamp in milliseconds (reads the clock if None)
        """
        with self._lock:
            elapsed = self.get_elapsed_time(now)
            animation_function = resolve_animation(self.current_animation)
            animation_function(elapsed, self.tempo, self.skeleton)

    def get_world_transform(self, bone_name: str) -> Transform2D:
        """
        Evaluate the current animation and compose a bone's world transform.

        Args:
            bone_name: Bone to read

        Returns:
            World-space Transform2D of the bone. For the root bone this is
            the live root transform itself, not a copy, so mutating it
            moves the skeleton.
        """
        with self._lock:
            bone = self.skeleton.get_bone(bone_name)
            self.update()
            return bone.get_world_transform()

    def get_bone_attribute(self, bone_name: str, attribute: str) -> float:
        """
        Read a world-space attribute of a bone.

        Args:
            bone_name: Bone to read
            attribute: "direction", "x position" or "y position"

        Returns:
            World direction in degrees, or world x/y position

        Raises:
            UnknownBoneError: If the bone does not exist
            UnknownAttributeError: If the attribute is not recognised
        """
        if attribute not in ATTRIBUTE_NAMES:
            raise UnknownAttributeError(attribute, ATTRIBUTE_NAMES)

        with self._lock:
            transform = self.get_world_transform(bone_name)
            x, y = transform.get_translation()

            if attribute == ATTRIBUTE_DIRECTION:
                return transform.get_direction()
            if attribute == ATTRIBUTE_X_POSITION:
                return x
            return y

    def stop(self):
        """Reset to the default animation (host stop hook)."""
        self.start_animation(DEFAULT_ANIMATION)

    def __repr__(self):
        return (
            f"Animator(animation='{self.current_animation}', tempo={self.tempo}, "
            f"elapsed={self.get_elapsed_time():.0f}ms)"
        )
