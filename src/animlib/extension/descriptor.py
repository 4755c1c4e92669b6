"""Block and menu definitions handed to the host when it registers the extension."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..animation.animations import ANIMATIONS
from ..config.settings import (
    ATTRIBUTE_NAMES,
    BONE_NAMES,
    DEFAULT_TEMPO_BPM,
    EXTENSION_NAME,
    EXTENSION_URL,
)

MENU_ANIMATION_NAMES = "ext_animation_animationNames"
MENU_BODY_PARTS = "ext_animation_bodyParts"
MENU_ATTRIBUTES = "ext_animation_attributes"


class BlockType(Enum):
    """Kinds of blocks the host can present."""
    COMMAND = " "
    REPORTER = "r"


@dataclass(frozen=True)
class BlockSpec:
    """One invocable command or query, as the host lists it."""

    block_type: BlockType
    label: str
    op_id: str
    defaults: Tuple[Any, ...] = ()

    def to_list(self) -> List[Any]:
        return [self.block_type.value, self.label, self.op_id, *self.defaults]


@dataclass(frozen=True)
class ExtensionStatus:
    """Status reported to the host (2 means ready)."""

    status: int
    msg: str

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "msg": self.msg}


@dataclass
class ExtensionDescriptor:
    """Display name, blocks and menus of the extension."""

    name: str
    url: str
    blocks: List[BlockSpec] = field(default_factory=list)
    menus: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def op_ids(self) -> List[str]:
        return [block.op_id for block in self.blocks]

    def to_dict(self) -> Dict[str, Any]:
        """Render in the host's block/menu format."""
        return {
            "blocks": [block.to_list() for block in self.blocks],
            "menus": {name: list(items) for name, items in self.menus.items()},
            "url": self.url,
        }


def build_descriptor() -> ExtensionDescriptor:
    """Create the descriptor for the skeletal animation extension."""
    animation_names = list(ANIMATIONS)
    return ExtensionDescriptor(
        name=EXTENSION_NAME,
        url=EXTENSION_URL,
        blocks=[
            BlockSpec(BlockType.COMMAND, f"start animation %m.{MENU_ANIMATION_NAMES}",
                      "startAnimation", (animation_names[0],)),
            BlockSpec(BlockType.COMMAND, "set dance speed to %n beats per minute",
                      "setDanceBPM", (DEFAULT_TEMPO_BPM,)),
            BlockSpec(BlockType.COMMAND, f"set %m.{MENU_BODY_PARTS} offset to %n,%n",
                      "setOffset", (BONE_NAMES[0], 0, 0)),
            BlockSpec(BlockType.REPORTER, "get current animation name",
                      "getAnimationName"),
            BlockSpec(BlockType.REPORTER, f"get %m.{MENU_BODY_PARTS} %m.{MENU_ATTRIBUTES}",
                      "getAttribute", (BONE_NAMES[0], ATTRIBUTE_NAMES[0])),
        ],
        menus={
            MENU_ANIMATION_NAMES: animation_names,
            MENU_BODY_PARTS: list(BONE_NAMES),
            MENU_ATTRIBUTES: list(ATTRIBUTE_NAMES),
        },
    )
