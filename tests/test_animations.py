"""Tests for procedural animation functions"""

import pytest
import numpy as np

from src.animlib.animation.animations import (
    ANIMATIONS,
    dance_animation,
    every_beat,
    every_other_beat,
    idle_animation,
    resolve_animation,
    triangle_wave,
    wave_hello_animation,
)
from src.animlib.animation.skeleton import Skeleton


def _local_directions(skeleton):
    return {name: bone.get_direction() for name, bone in skeleton}


def test_registry_names():
    """Test the named animation set"""
    assert list(ANIMATIONS) == ["wave hello", "dance", "idle"]


def test_resolve_unknown_falls_back_to_idle():
    """Test unknown names resolve to the idle animation"""
    assert resolve_animation("not-a-real-animation") is idle_animation
    assert resolve_animation("dance") is dance_animation


def test_triangle_wave_shape():
    """Test triangle wave hits its extremes at the expected phases"""
    assert triangle_wave(0) == 1
    assert triangle_wave(1) == 0
    assert triangle_wave(2) == -1
    assert triangle_wave(3) == 0
    assert triangle_wave(4) == 1


@pytest.mark.parametrize("bpm", [30, 60, 120, 173])
def test_beat_signals_stay_in_range(bpm):
    """Test both dance signals always lie in [-1, 1]"""
    for elapsed in np.linspace(0, 20000, 401):
        assert -1.0 <= every_beat(elapsed, bpm) <= 1.0
        assert -1.0 <= every_other_beat(elapsed, bpm) <= 1.0


def test_every_beat_swings_once_per_beat():
    """Test every_beat travels extreme to extreme across one beat at 60 BPM"""
    assert every_beat(0, 60) == pytest.approx(1.0)
    assert every_beat(500, 60) == pytest.approx(0.0)
    assert every_beat(1000, 60) == pytest.approx(-1.0)
    assert every_beat(2000, 60) == pytest.approx(1.0)


def test_every_other_beat_swings_every_two_beats():
    """Test every_other_beat takes two beats per swing at 60 BPM"""
    assert every_other_beat(0, 60) == pytest.approx(1.0)
    assert every_other_beat(1000, 60) == pytest.approx(0.0)
    assert every_other_beat(2000, 60) == pytest.approx(-1.0)
    assert every_other_beat(4000, 60) == pytest.approx(1.0)


@pytest.mark.parametrize("elapsed", [0.0, 137.0, 640.0, 1234.5])
def test_beat_signal_periodicity(elapsed):
    """Test signal values repeat and mirror on beat boundaries at 60 BPM"""
    # One beat flips every_beat, two beats restore it
    assert every_beat(elapsed + 1000, 60) == pytest.approx(-every_beat(elapsed, 60))
    assert every_beat(elapsed + 2000, 60) == pytest.approx(every_beat(elapsed, 60))
    # Two beats flip every_other_beat, four beats restore it
    assert every_other_beat(elapsed + 2000, 60) == pytest.approx(-every_other_beat(elapsed, 60))
    assert every_other_beat(elapsed + 4000, 60) == pytest.approx(every_other_beat(elapsed, 60))


def test_tempo_scales_signal():
    """Test doubling tempo halves the time to reach the same phase"""
    assert every_beat(250, 120) == pytest.approx(every_beat(500, 60))


def test_idle_zeroes_every_bone():
    """Test idle sets every bone to direction 0"""
    skeleton = Skeleton()
    for _, bone in skeleton:
        bone.set_direction(33)

    idle_animation(9999.0, 87, skeleton)

    assert all(direction == 0.0 for direction in _local_directions(skeleton).values())


def test_wave_hello_pose():
    """Test right arm waves around -75 and left arm is held at -60"""
    skeleton = Skeleton()

    wave_hello_animation(0.0, 120, skeleton)
    directions = _local_directions(skeleton)
    assert directions["right arm"] == pytest.approx(-55.0)
    assert directions["left arm"] == pytest.approx(-60.0)
    assert directions["body"] == 0.0
    assert directions["head"] == 0.0

    wave_hello_animation(300 * np.pi, 120, skeleton)
    assert skeleton["right arm"].get_direction() == pytest.approx(-95.0)


def test_wave_hello_ignores_tempo():
    """Test wave hello produces the same pose for any tempo"""
    slow = Skeleton()
    fast = Skeleton()
    wave_hello_animation(777.0, 40, slow)
    wave_hello_animation(777.0, 200, fast)
    assert _local_directions(slow) == pytest.approx(_local_directions(fast))


def test_dance_pose_at_start():
    """Test dance pose with both signals at +1"""
    skeleton = Skeleton()
    dance_animation(0.0, 120, skeleton)
    directions = _local_directions(skeleton)

    assert directions["body"] == pytest.approx(-5.0)
    assert directions["head"] == pytest.approx(15.0)
    assert directions["left arm"] == pytest.approx(-20.0)
    assert directions["right arm"] == pytest.approx(20.0)
    assert directions["left leg"] == pytest.approx(20.0)
    assert directions["right leg"] == pytest.approx(-20.0)


def test_dance_pose_mid_beat():
    """Test dance pose a quarter cycle into the beat at 120 BPM"""
    skeleton = Skeleton()
    dance_animation(250.0, 120, skeleton)
    directions = _local_directions(skeleton)

    # every_beat = 0, every_other_beat = 0.5
    assert directions["body"] == pytest.approx(0.0, abs=1e-9)
    assert directions["head"] == pytest.approx(0.0, abs=1e-9)
    assert directions["left arm"] == pytest.approx(-30.0)
    assert directions["right arm"] == pytest.approx(30.0)
    assert directions["left leg"] == pytest.approx(10.0)
    assert directions["right leg"] == pytest.approx(-10.0)


def test_animations_never_touch_translation():
    """Test every animation leaves bone offsets alone"""
    skeleton = Skeleton()
    skeleton["left arm"].set_translation(-7, 3)

    for animation in ANIMATIONS.values():
        animation(1500.0, 90, skeleton)
        assert skeleton["left arm"].get_translation() == (-7.0, 3.0)


@pytest.mark.parametrize("elapsed", [0.0, 137.0, 640.0, 1234.5, 5000.0])
def test_negative_tempo_reverses_signals(elapsed):
    """Test a negative tempo plays the beat signals backwards in time"""
    assert every_beat(elapsed, -60) == pytest.approx(every_beat(-elapsed, 60))
    assert every_other_beat(elapsed, -60) == pytest.approx(every_other_beat(-elapsed, 60))


@pytest.mark.parametrize("bpm", [-30, -60, -120, -173])
def test_negative_tempo_signals_stay_in_range(bpm):
    """Test both dance signals stay in [-1, 1] for negative tempo"""
    for elapsed in np.linspace(0, 20000, 401):
        assert -1.0 <= every_beat(elapsed, bpm) <= 1.0
        assert -1.0 <= every_other_beat(elapsed, bpm) <= 1.0


def test_idle_uses_skeleton_reset(monkeypatch):
    """Test idle delegates the rest pose to the skeleton"""
    skeleton = Skeleton()
    calls = []
    monkeypatch.setattr(skeleton, "reset_pose", lambda: calls.append(True))

    idle_animation(0.0, 120, skeleton)

    assert calls == [True]


def test_zero_tempo_dance_is_static():
    """Test a zero tempo freezes the dance at its starting pose"""
    start = Skeleton()
    later = Skeleton()
    dance_animation(0.0, 0, start)
    dance_animation(5000.0, 0, later)
    assert _local_directions(start) == pytest.approx(_local_directions(later))
