"""
Skeletal Animation Extension

Boundary object the host integration layer constructs once and registers.
Every host call lands on one of the operations below.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional
import logging

from ..animation.animator import Animator
from ..config.settings import EXTENSION_STATUS_MESSAGE, EXTENSION_STATUS_READY
from ..core.clock import monotonic_ms
from ..errors import UnknownOperationError
from .descriptor import ExtensionDescriptor, ExtensionStatus, build_descriptor

logger = logging.getLogger(__name__)


class SkeletalAnimationExtension:
    """
    Host-facing wrapper around a single Animator.

    The host owns the instance and passes it to every entry point; there is
    no module-level singleton.
    """

    def __init__(self, clock: Callable[[], float] = monotonic_ms, animator: Optional[Animator] = None):
        """
        Initialize extension.

        Args:
            clock: "now" source in milliseconds, supplied by the host
            animator: Animator to expose (a new one on ``clock`` if None)
        """
        self.animator = animator if animator is not None else Animator(clock=clock)
        self.descriptor: ExtensionDescriptor = build_descriptor()
        self._operations: Dict[str, Callable[..., Any]] = {
            "startAnimation": self.startAnimation,
            "setDanceBPM": self.setDanceBPM,
            "setOffset": self.setOffset,
            "getAnimationName": self.getAnimationName,
            "getAttribute": self.getAttribute,
        }

    @property
    def name(self) -> str:
        return self.descriptor.name

    def get_status(self) -> ExtensionStatus:
        return ExtensionStatus(EXTENSION_STATUS_READY, EXTENSION_STATUS_MESSAGE)

    def stop(self):
        """Host stop hook: back to idle."""
        logger.debug("Extension stopped, resetting to idle")
        self.animator.stop()

    def invoke(self, op_id: str, *args: Any) -> Any:
        """
        Dispatch a host call by its stable operation id.

        Raises:
            UnknownOperationError: If op_id is not one of the descriptor's blocks
        """
        try:
            operation = self._operations[op_id]
        except KeyError:
            raise UnknownOperationError(op_id, self._operations) from None
        return operation(*args)

    # Host-facing names match the descriptor's operation ids

    def startAnimation(self, name: str):
        self.animator.start_animation(name)

    def setDanceBPM(self, bpm: float):
        self.animator.set_tempo(bpm)

    def setOffset(self, body_part: str, offset_x: float, offset_y: float):
        self.animator.set_bone_offset(body_part, offset_x, offset_y)

    def getAnimationName(self) -> str:
        return self.animator.get_current_animation_name()

    def getAttribute(self, body_part: str, attribute: str) -> float:
        return self.animator.get_bone_attribute(body_part, attribute)

    def __repr__(self):
        return f"SkeletalAnimationExtension(name='{self.name}', animator={self.animator!r})"
