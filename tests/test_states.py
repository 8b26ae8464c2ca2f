import json

import pytest

from armmotion.duration import Duration
from armmotion.states import (
    GripperState,
    VacuumGripperDeviceStatus,
    VacuumGripperState,
    VirtualWallCuboid,
)


def test_gripper_state_defaults_are_zero():
    state = GripperState()
    assert state.width == 0.0
    assert state.max_width == 0.0
    assert state.is_grasped is False
    assert state.temperature == 0
    assert state.time == Duration(0)


def test_gripper_state_json_round_trip():
    state = GripperState(
        width=0.04, max_width=0.08, is_grasped=True, temperature=30, time=Duration(12345)
    )
    data = json.loads(state.to_json())
    assert list(data) == ["width", "max_width", "is_grasped", "temperature", "time"]
    assert data["width"] == 0.04
    assert data["max_width"] == 0.08
    assert data["is_grasped"] is True
    assert data["temperature"] == 30
    assert data["time"] == 12.345
    assert str(state) == state.to_json()


def test_gripper_state_accepts_milliseconds_for_time():
    state = GripperState(time=250)
    assert state.time == Duration(250)


def test_gripper_state_rejects_temperature_out_of_range():
    with pytest.raises(ValueError):
        GripperState(temperature=70000)
    with pytest.raises(ValueError):
        GripperState(temperature=-1)


def test_device_status_order():
    assert [status.value for status in VacuumGripperDeviceStatus] == [0, 1, 2, 3]
    assert VacuumGripperDeviceStatus(3) is VacuumGripperDeviceStatus.RED


def test_vacuum_gripper_state_json_round_trip():
    state = VacuumGripperState(
        in_control_range=True,
        part_detached=False,
        part_present=True,
        device_status=VacuumGripperDeviceStatus.RED,
        actual_power=55,
        vacuum=100,
        time=Duration(1000),
    )
    data = json.loads(state.to_json())
    assert list(data) == [
        "in_control_range",
        "part_detached",
        "part_present",
        "device_status",
        "actual_power",
        "vacuum",
        "time",
    ]
    assert data["in_control_range"] is True
    assert data["part_detached"] is False
    assert data["part_present"] is True
    assert data["device_status"] == "red"
    assert data["actual_power"] == 55
    assert data["vacuum"] == 100
    assert data["time"] == 1.0


def test_vacuum_gripper_state_converts_status_from_int():
    state = VacuumGripperState(device_status=1)
    assert state.device_status is VacuumGripperDeviceStatus.YELLOW


def test_vacuum_gripper_state_rejects_invalid_values():
    with pytest.raises(ValueError):
        VacuumGripperState(device_status=7)
    with pytest.raises(ValueError):
        VacuumGripperState(vacuum=-5)
    with pytest.raises(TypeError):
        VacuumGripperState(actual_power=1.5)


def test_virtual_wall_cuboid_stores_tuples():
    frame = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]
    wall = VirtualWallCuboid(id=3, object_world_size=[2, 2, 2], p_frame=frame, active=True)
    assert wall.object_world_size == (2.0, 2.0, 2.0)
    assert wall.p_frame == tuple(float(value) for value in frame)
    assert wall.active is True


def test_virtual_wall_cuboid_rejects_wrong_sizes():
    with pytest.raises(ValueError):
        VirtualWallCuboid(id=1, object_world_size=[1, 2], p_frame=[0] * 16, active=False)
    with pytest.raises(ValueError):
        VirtualWallCuboid(id=1, object_world_size=[1, 2, 3], p_frame=[0] * 9, active=False)