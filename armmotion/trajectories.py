"""Time-parameterised demonstration motions and the settings they run with.

Each motion is a pure function of the time since the motion started, in
seconds. It returns the command for that instant. Once the motion's
duration is reached, the command is marked as finished.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from armmotion.commands import (
    CartesianPose,
    CartesianVelocities,
    JointPositions,
    JointVelocities,
    motion_finished,
)


def _float_tuple(name: str, values: Sequence[float], size: int) -> tuple[float, ...]:
    result = tuple(float(value) for value in values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} values, got {len(result)}")
    return result


@dataclass(frozen=True)
class CollisionBehavior:
    """Contact and collision thresholds for joint torques and Cartesian forces.

    Torque thresholds hold seven values, one per joint. Force thresholds hold
    six values: three forces and then three torques.
    """

    lower_torque_thresholds_acceleration: tuple[float, ...]
    upper_torque_thresholds_acceleration: tuple[float, ...]
    lower_torque_thresholds_nominal: tuple[float, ...]
    upper_torque_thresholds_nominal: tuple[float, ...]
    lower_force_thresholds_acceleration: tuple[float, ...]
    upper_force_thresholds_acceleration: tuple[float, ...]
    lower_force_thresholds_nominal: tuple[float, ...]
    upper_force_thresholds_nominal: tuple[float, ...]

    def __post_init__(self) -> None:
        for name in (
            "lower_torque_thresholds_acceleration",
            "upper_torque_thresholds_acceleration",
            "lower_torque_thresholds_nominal",
            "upper_torque_thresholds_nominal",
        ):
            object.__setattr__(self, name, _float_tuple(name, getattr(self, name), 7))
        for name in (
            "lower_force_thresholds_acceleration",
            "upper_force_thresholds_acceleration",
            "lower_force_thresholds_nominal",
            "upper_force_thresholds_nominal",
        ):
            object.__setattr__(self, name, _float_tuple(name, getattr(self, name), 6))


def _uniform_behavior(
    torques: Sequence[float], forces: Sequence[float]
) -> CollisionBehavior:
    return CollisionBehavior(
        torques, torques, torques, torques, forces, forces, forces, forces
    )


DEFAULT_COLLISION_BEHAVIOR = CollisionBehavior(
    (20.0,) * 7,
    (20.0,) * 7,
    (10.0,) * 7,
    (10.0,) * 7,
    (20.0,) * 6,
    (20.0,) * 6,
    (10.0,) * 6,
    (10.0,) * 6,
)
"""Collision behavior set before every demonstration."""

DEFAULT_JOINT_IMPEDANCE = (3000.0, 3000.0, 3000.0, 2500.0, 2500.0, 2000.0, 2000.0)
DEFAULT_CARTESIAN_IMPEDANCE = (3000.0, 3000.0, 3000.0, 300.0, 300.0, 300.0)

MOTION_COLLISION_BEHAVIOR = _uniform_behavior(
    (20.0, 20.0, 18.0, 18.0, 16.0, 14.0, 12.0),
    (20.0, 20.0, 20.0, 25.0, 25.0, 25.0),
)
"""Collision behavior for the pose, elbow and joint motions."""

CARTESIAN_VELOCITY_COLLISION_BEHAVIOR = CollisionBehavior(
    lower_torque_thresholds_acceleration=(25.0, 25.0, 22.0, 20.0, 19.0, 17.0, 14.0),
    upper_torque_thresholds_acceleration=(35.0, 35.0, 32.0, 30.0, 29.0, 27.0, 24.0),
    lower_torque_thresholds_nominal=(25.0, 25.0, 22.0, 20.0, 19.0, 17.0, 14.0),
    upper_torque_thresholds_nominal=(35.0, 35.0, 32.0, 30.0, 29.0, 27.0, 24.0),
    lower_force_thresholds_acceleration=(30.0, 30.0, 30.0, 25.0, 25.0, 25.0),
    upper_force_thresholds_acceleration=(40.0, 40.0, 40.0, 35.0, 35.0, 35.0),
    lower_force_thresholds_nominal=(30.0, 30.0, 30.0, 25.0, 25.0, 25.0),
    upper_force_thresholds_nominal=(40.0, 40.0, 40.0, 35.0, 35.0, 35.0),
)
"""Collision behavior for the Cartesian velocity motion."""

CONSECUTIVE_MOTION_COLLISION_BEHAVIOR = _uniform_behavior(
    (10.0, 10.0, 9.0, 9.0, 8.0, 7.0, 6.0),
    (10.0, 10.0, 10.0, 12.5, 12.5, 12.5),
)
"""Collision behavior for the repeated joint velocity motion."""

INITIAL_JOINT_CONFIGURATION = (
    0.0,
    -math.pi / 4,
    0.0,
    -3 * math.pi / 4,
    0.0,
    math.pi / 2,
    math.pi / 4,
)
"""Joint configuration every demonstration starts from."""

_POSE_RADIUS = 0.3
_POSE_DURATION = 10.0
_ELBOW_DURATION = 10.0
_JOINT_POSITION_DURATION = 5.0

_CARTESIAN_VELOCITY_PERIOD = 4.0
_CARTESIAN_VELOCITY_MAX = 0.1
_CARTESIAN_VELOCITY_ANGLE = math.pi / 4.0

_CONSECUTIVE_PERIOD = 4.0
_CONSECUTIVE_OMEGA_MAX = 0.2

_JOINT_VELOCITY_PERIOD = 1.0
_JOINT_VELOCITY_OMEGA_MAX = 1.0


def _check_time(time: float) -> float:
    time = float(time)
    if not math.isfinite(time) or time < 0.0:
        raise ValueError(f"time must be a finite non-negative number, got {time}")
    return time


def _oscillation(time: float, period: float, peak: float) -> float:
    """A smooth velocity bump of the given peak that flips sign every period."""
    cycle = -1.0 if int(time // period) % 2 else 1.0
    return cycle * peak / 2.0 * (1.0 - math.cos(2.0 * math.pi / period * time))


def _finish_after(command, time: float, duration: float):
    return motion_finished(command) if time >= duration else command


def cartesian_pose_motion(initial_pose: Sequence[float], time: float) -> CartesianPose:
    """Move the end effector along a circular arc in the x-z plane."""
    time = _check_time(time)
    pose = list(_float_tuple("initial_pose", initial_pose, 16))
    angle = math.pi / 4 * (1 - math.cos(math.pi / 5.0 * time))
    pose[12] += _POSE_RADIUS * math.sin(angle)
    pose[14] += _POSE_RADIUS * (math.cos(angle) - 1)
    return _finish_after(CartesianPose(pose), time, _POSE_DURATION)


def cartesian_velocity_motion(time: float) -> CartesianVelocities:
    """Move the end effector forth and back diagonally in the x-z plane."""
    time = _check_time(time)
    v = _oscillation(time, _CARTESIAN_VELOCITY_PERIOD, _CARTESIAN_VELOCITY_MAX)
    v_x = math.cos(_CARTESIAN_VELOCITY_ANGLE) * v
    v_z = -math.sin(_CARTESIAN_VELOCITY_ANGLE) * v
    command = CartesianVelocities((v_x, 0.0, v_z, 0.0, 0.0, 0.0))
    return _finish_after(command, time, 2 * _CARTESIAN_VELOCITY_PERIOD)


def consecutive_joint_velocity_motion(time: float) -> JointVelocities:
    """Swing the third joint forth and back, for motions run one after another."""
    time = _check_time(time)
    omega = _oscillation(time, _CONSECUTIVE_PERIOD, _CONSECUTIVE_OMEGA_MAX)
    command = JointVelocities((0.0, 0.0, omega, 0.0, 0.0, 0.0, 0.0))
    return _finish_after(command, time, 2 * _CONSECUTIVE_PERIOD)


def elbow_motion(
    initial_pose: Sequence[float], initial_elbow: Sequence[float], time: float
) -> CartesianPose:
    """Hold the end effector pose while turning the elbow out and back."""
    time = _check_time(time)
    elbow = list(_float_tuple("initial_elbow", initial_elbow, 2))
    elbow[0] += math.pi / 10.0 * (1.0 - math.cos(math.pi / 5.0 * time))
    command = CartesianPose(initial_pose, elbow)
    return _finish_after(command, time, _ELBOW_DURATION)


def joint_position_motion(
    initial_position: Sequence[float], time: float
) -> JointPositions:
    """Turn joints four, five and seven out and back."""
    time = _check_time(time)
    positions = list(_float_tuple("initial_position", initial_position, 7))
    delta_angle = math.pi / 8.0 * (1 - math.cos(math.pi / 2.5 * time))
    for joint in (3, 4, 6):
        positions[joint] += delta_angle
    return _finish_after(JointPositions(positions), time, _JOINT_POSITION_DURATION)


def joint_velocity_motion(time: float) -> JointVelocities:
    """Swing the last four joints forth and back."""
    time = _check_time(time)
    omega = _oscillation(time, _JOINT_VELOCITY_PERIOD, _JOINT_VELOCITY_OMEGA_MAX)
    command = JointVelocities((0.0, 0.0, 0.0, omega, omega, omega, omega))
    return _finish_after(command, time, 2 * _JOINT_VELOCITY_PERIOD)