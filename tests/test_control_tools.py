import math

import pytest

from armmotion import control_tools
from armmotion.control_tools import (
    has_realtime_kernel,
    is_homogeneous_transformation,
    is_valid_elbow,
)

IDENTITY = [1.0, 0, 0, 0, 0, 1.0, 0, 0, 0, 0, 1.0, 0, 0, 0, 0, 1.0]


def _rotation_z(angle, translation=(0.0, 0.0, 0.0)):
    c, s = math.cos(angle), math.sin(angle)
    return [c, s, 0.0, 0.0, -s, c, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, *translation, 1.0]


@pytest.mark.parametrize("sign", [1.0, -1.0])
def test_elbow_with_unit_sign_is_valid(sign):
    assert is_valid_elbow([0.3, sign]) is True


@pytest.mark.parametrize("sign", [0.0, 0.5, 2.0, -1.5])
def test_elbow_with_other_sign_is_invalid(sign):
    assert is_valid_elbow([0.3, sign]) is False


def test_elbow_with_wrong_length_is_rejected():
    with pytest.raises(ValueError):
        is_valid_elbow([1.0])


def test_identity_is_homogeneous():
    assert is_homogeneous_transformation(IDENTITY) is True


@pytest.mark.parametrize("angle", [0.1, 1.0, math.pi / 2, 3.0])
def test_rotation_with_translation_is_homogeneous(angle):
    assert is_homogeneous_transformation(_rotation_z(angle, (0.3, -0.2, 0.5))) is True


@pytest.mark.parametrize("index", [3, 7, 11])
def test_nonzero_bottom_row_is_not_homogeneous(index):
    transform = list(IDENTITY)
    transform[index] = 0.1
    assert is_homogeneous_transformation(transform) is False


def test_bottom_right_not_one_is_not_homogeneous():
    transform = list(IDENTITY)
    transform[15] = 2.0
    assert is_homogeneous_transformation(transform) is False


def test_scaled_column_is_not_homogeneous():
    transform = list(IDENTITY)
    transform[0] = 2.0
    assert is_homogeneous_transformation(transform) is False


def test_skewed_rotation_is_not_homogeneous():
    transform = list(IDENTITY)
    transform[1] = 0.5
    assert is_homogeneous_transformation(transform) is False


def test_transform_with_wrong_length_is_rejected():
    with pytest.raises(ValueError):
        is_homogeneous_transformation(IDENTITY[:15])


def test_realtime_kernel_detected_when_marker_exists(tmp_path, monkeypatch):
    marker = tmp_path / "realtime"
    marker.write_text("1\n")
    monkeypatch.setattr(control_tools.sys, "platform", "linux")
    monkeypatch.setattr(control_tools, "_REALTIME_PATH", marker)
    assert has_realtime_kernel() is True


def test_no_realtime_kernel_without_marker(tmp_path, monkeypatch):
    monkeypatch.setattr(control_tools.sys, "platform", "linux")
    monkeypatch.setattr(control_tools, "_REALTIME_PATH", tmp_path / "missing")
    assert has_realtime_kernel() is False


def test_windows_always_counts_as_realtime(tmp_path, monkeypatch):
    monkeypatch.setattr(control_tools.sys, "platform", "win32")
    monkeypatch.setattr(control_tools, "_REALTIME_PATH", tmp_path / "missing")
    assert has_realtime_kernel() is True