"""
Transform2D

Rigid 2D affine transform (rotation + translation) with an optional parent link.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


class Transform2D:
    """
    Rigid 2D pose expressed relative to an optional parent.

    The affine matrix is

        | r[0,0] r[1,0] t[0] |
        | r[0,1] r[1,1] t[1] |
        |   0      0     1   |

    where ``r[col]`` is a basis column. The rotation block is only ever
    written from an angle, so it stays orthonormal with determinant 1.
    Translation is stored separately to keep the math readable.
    """

    def __init__(self, parent: Optional['Transform2D'] = None):
        """
        Initialize an identity transform.

        Args:
            parent: Parent transform (None for a root). Not owned.
        """
        # Row i holds basis column i: [x axis, y axis]
        self._rotation_columns = np.array([[1.0, 0.0], [0.0, 1.0]])
        self._translation = np.zeros(2)
        self._parent = parent

    @property
    def parent(self) -> Optional['Transform2D']:
        return self._parent

    @property
    def rotation_matrix(self) -> np.ndarray:
        """2x2 rotation block (copy)."""
        return self._rotation_columns.T.copy()

    @staticmethod
    def multiply(lhs: 'Transform2D', rhs: 'Transform2D') -> 'Transform2D':
        """
        Concatenate two transforms.

        Args:
            lhs: Outer transform (applied last)
            rhs: Inner transform (applied first)

        Returns:
            New parentless Transform2D equal to ``lhs * rhs``
        """
        lhs_rotation = lhs._rotation_columns.T
        rhs_rotation = rhs._rotation_columns.T

        result = Transform2D()
        result._rotation_columns = (lhs_rotation @ rhs_rotation).T
        result._translation = lhs_rotation @ rhs._translation + lhs._translation
        return result

    def set_parent(self, parent: Optional['Transform2D']):
        """
        Assign or clear the parent transform.

        The parent graph must stay acyclic; no check is made here.
        """
        self._parent = parent

    def get_world_transform(self) -> 'Transform2D':
        """
        Compose this transform with every ancestor.

        Recomputed on each call since ancestors may have moved.

        Returns:
            ``self`` for a root, otherwise a new Transform2D equal to
            ``parent_world * local``
        """
        if self._parent is None:
            return self
        parent_world = self._parent.get_world_transform()
        return Transform2D.multiply(parent_world, self)

    def set_translation(self, x: float, y: float):
        """Set the local translation."""
        self._translation[0] = x
        self._translation[1] = y

    def get_translation(self) -> Tuple[float, float]:
        """Get the local translation as an (x, y) tuple."""
        return float(self._translation[0]), float(self._translation[1])

    def set_direction(self, degrees: float):
        """
        Set the rotation from a signed angle.

        Args:
            degrees: Counter-clockwise rotation in degrees (any range)
        """
        radians = np.radians(degrees)
        cosine = np.cos(radians)
        sine = np.sin(radians)
        self._rotation_columns[0, 0] = cosine
        self._rotation_columns[0, 1] = sine
        self._rotation_columns[1, 0] = -sine
        self._rotation_columns[1, 1] = cosine

    def get_direction(self) -> float:
        """
        Get the rotation as a signed angle.

        Returns:
            Degrees in (-180, 180], read from the x basis column
        """
        x_axis = self._rotation_columns[0]
        return float(np.degrees(np.arctan2(x_axis[1], x_axis[0])))

    def __repr__(self):
        x, y = self.get_translation()
        return f"Transform2D(direction={self.get_direction():.2f}, translation=({x:.2f}, {y:.2f}))"
