"""
Skeleton

Fixed one-level bone hierarchy: a root body with every other part attached to it.
"""

from typing import Dict, Iterator, Tuple
import logging

from ..config.settings import BONE_NAMES, ROOT_BONE
from ..core.transform2d import Transform2D
from ..errors import UnknownBoneError

logger = logging.getLogger(__name__)


class Skeleton:
    """
    Named set of bones, each owning one Transform2D.

    Provides:
    - Lookup of bone transforms by name
    - Iteration in canonical bone order
    - Resetting every bone to the rest direction

    The bone set is closed: bones are never added or removed after
    construction, only their transforms change.
    """

    def __init__(self, name: str = "Skeleton"):
        """
        Build the bone set and wire every bone to the root.

        Args:
            name: Skeleton name for debugging
        """
        self.name = name
        self.root = Transform2D()
        self.bone_by_name: Dict[str, Transform2D] = {ROOT_BONE: self.root}

        for bone_name in BONE_NAMES:
            if bone_name == ROOT_BONE:
                continue
            self.bone_by_name[bone_name] = Transform2D(parent=self.root)

        logger.debug("Built %s with bones %s", name, list(self.bone_by_name))

    def get_bone(self, name: str) -> Transform2D:
        """
        Find a bone by name.

        Args:
            name: Bone name, one of BONE_NAMES

        Returns:
            The bone's Transform2D

        Raises:
            UnknownBoneError: If the name is not a bone of this skeleton
        """
        try:
            return self.bone_by_name[name]
        except (KeyError, TypeError):
            raise UnknownBoneError(name, BONE_NAMES) from None

    def __getitem__(self, name: str) -> Transform2D:
        return self.get_bone(name)

    def __contains__(self, name: object) -> bool:
        return name in self.bone_by_name

    def __iter__(self) -> Iterator[Tuple[str, Transform2D]]:
        for bone_name in BONE_NAMES:
            yield bone_name, self.bone_by_name[bone_name]

    def __len__(self) -> int:
        return len(self.bone_by_name)

    def reset_pose(self):
        """Reset every bone to direction 0 (offsets are kept)."""
        for transform in self.bone_by_name.values():
            transform.set_direction(0)

    def __repr__(self):
        return f"Skeleton(name='{self.name}', bones={len(self.bone_by_name)}, root='{ROOT_BONE}')"
