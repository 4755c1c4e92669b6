"""Host integration boundary for the animation core."""

from .descriptor import (
    BlockSpec,
    BlockType,
    ExtensionDescriptor,
    ExtensionStatus,
    build_descriptor,
)
from .extension import SkeletalAnimationExtension

__all__ = [
    "BlockSpec",
    "BlockType",
    "ExtensionDescriptor",
    "ExtensionStatus",
    "build_descriptor",
    "SkeletalAnimationExtension",
]
