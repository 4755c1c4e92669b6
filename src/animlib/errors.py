"""Errors raised when a caller steps outside the fixed bone/attribute/operation sets."""

from __future__ import annotations

from typing import Iterable


class AnimationError(Exception):
    """Base class for animation core errors."""


class _UnknownNameError(AnimationError, KeyError):
    kind = "name"

    def __init__(self, name: object, accepted: Iterable[str]):
        self.name = name
        self.accepted = tuple(accepted)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown {self.kind} {self.name!r}. Available: {list(self.accepted)}"


class UnknownBoneError(_UnknownNameError):
    """Raised when a bone name is not part of the skeleton."""

    kind = "bone"


class UnknownAttributeError(_UnknownNameError):
    """Raised when a queried attribute is not direction, x position or y position."""

    kind = "attribute"


class UnknownOperationError(_UnknownNameError):
    """Raised when the host invokes an operation id the extension does not expose."""

    kind = "operation"
