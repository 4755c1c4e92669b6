"""
AnimLib - Skeletal Animation Core

Hierarchical 2D transforms, a fixed six-bone skeleton and procedural
animations (idle, wave hello, dance) sampled lazily on every query.
"""

# Configuration
from .config.settings import *

# Core
from .core.transform2d import Transform2D
from .core.clock import ManualClock, monotonic_ms

# Animation
from .animation.skeleton import Skeleton
from .animation.animations import ANIMATIONS, resolve_animation
from .animation.animator import Animator

# Host boundary
from .extension import ExtensionDescriptor, ExtensionStatus, SkeletalAnimationExtension

# Errors
from .errors import (
    AnimationError,
    UnknownAttributeError,
    UnknownBoneError,
    UnknownOperationError,
)

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Core
    "Transform2D",
    "ManualClock",
    "monotonic_ms",
    # Animation
    "Skeleton",
    "ANIMATIONS",
    "resolve_animation",
    "Animator",
    # Host boundary
    "ExtensionDescriptor",
    "ExtensionStatus",
    "SkeletalAnimationExtension",
    # Errors
    "AnimationError",
    "UnknownBoneError",
    "UnknownAttributeError",
    "UnknownOperationError",
]
