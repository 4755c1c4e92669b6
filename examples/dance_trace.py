#!/usr/bin/env python3
"""
Dance Trace Example

Samples the dance animation at a few timestamps with a manual clock and
prints every bone's world pose. Nothing is drawn.
"""

import sys
sys.path.insert(0, '..')

import logging

from src.animlib import (
    BONE_NAMES,
    ManualClock,
    SkeletalAnimationExtension,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    clock = ManualClock()
    extension = SkeletalAnimationExtension(clock=clock)

    # Spread the limbs out so positions are interesting
    extension.setOffset("body", 0, 0)
    extension.setOffset("head", 0, 40)
    extension.setOffset("left arm", -20, 30)
    extension.setOffset("right arm", 20, 30)
    extension.setOffset("left leg", -10, -30)
    extension.setOffset("right leg", 10, -30)

    extension.setDanceBPM(90)
    extension.startAnimation("dance")

    for _ in range(5):
        print(f"t = {clock.now_ms:6.0f} ms")
        for bone in BONE_NAMES:
            direction = extension.getAttribute(bone, "direction")
            x = extension.getAttribute(bone, "x position")
            y = extension.getAttribute(bone, "y position")
            print(f"  {bone:>9}: dir={direction:7.2f}  pos=({x:7.2f}, {y:7.2f})")
        clock.advance(250)

    extension.stop()
    print(f"Stopped, now playing '{extension.getAnimationName()}'")


if __name__ == "__main__":
    main()
