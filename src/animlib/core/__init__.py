"""Core transform math and time sources"""
from .transform2d import Transform2D
from .clock import ManualClock, monotonic_ms

__all__ = [
    "Transform2D",
    "ManualClock",
    "monotonic_ms",
]
