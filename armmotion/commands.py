"""Commands sent to the arm, and the motion generator each one selects."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeVar, Union


def _float_tuple(name: str, values: Sequence[float], size: int) -> tuple[float, ...]:
    result = tuple(float(value) for value in values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} values, got {len(result)}")
    return result


@dataclass(frozen=True)
class _Finishable:
    motion_finished: bool = field(default=False, kw_only=True)


@dataclass(frozen=True)
class JointPositions(_Finishable):
    """Desired joint positions in radians."""

    q: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "q", _float_tuple("q", self.q, 7))


@dataclass(frozen=True)
class JointVelocities(_Finishable):
    """Desired joint velocities in radians per second."""

    dq: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "dq", _float_tuple("dq", self.dq, 7))


@dataclass(frozen=True)
class CartesianPose(_Finishable):
    """Desired end effector pose as a column-major 4x4 matrix, with an optional elbow."""

    o_t_ee: tuple[float, ...]
    elbow: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "o_t_ee", _float_tuple("o_t_ee", self.o_t_ee, 16))
        if self.elbow is not None:
            object.__setattr__(self, "elbow", _float_tuple("elbow", self.elbow, 2))

    @property
    def has_elbow(self) -> bool:
        """Whether an elbow configuration is given."""
        return self.elbow is not None


@dataclass(frozen=True)
class CartesianVelocities(_Finishable):
    """Desired end effector twist, with an optional elbow."""

    o_dp_ee: tuple[float, ...]
    elbow: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "o_dp_ee", _float_tuple("o_dp_ee", self.o_dp_ee, 6))
        if self.elbow is not None:
            object.__setattr__(self, "elbow", _float_tuple("elbow", self.elbow, 2))

    @property
    def has_elbow(self) -> bool:
        """Whether an elbow configuration is given."""
        return self.elbow is not None


@dataclass(frozen=True)
class Torques(_Finishable):
    """Desired joint torques in Nm."""

    tau_j: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tau_j", _float_tuple("tau_j", self.tau_j, 7))


_IDENTITY_POSE = (1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)


@dataclass(frozen=True)
class RobotCommand:
    """A command as sent to the arm, kept for logging."""

    joint_positions: JointPositions = field(
        default_factory=lambda: JointPositions((0,) * 7)
    )
    joint_velocities: JointVelocities = field(
        default_factory=lambda: JointVelocities((0,) * 7)
    )
    cartesian_pose: CartesianPose = field(
        default_factory=lambda: CartesianPose(_IDENTITY_POSE)
    )
    cartesian_velocities: CartesianVelocities = field(
        default_factory=lambda: CartesianVelocities((0,) * 6)
    )
    torques: Torques = field(default_factory=lambda: Torques((0,) * 7))


class MotionGeneratorMode(enum.Enum):
    """Motion generator selected on the arm for a command type."""

    JOINT_POSITION = "joint_position"
    JOINT_VELOCITY = "joint_velocity"
    CARTESIAN_POSITION = "cartesian_position"
    CARTESIAN_VELOCITY = "cartesian_velocity"


MotionCommand = Union[JointPositions, JointVelocities, CartesianPose, CartesianVelocities]

_MODES: dict[type, MotionGeneratorMode] = {
    JointPositions: MotionGeneratorMode.JOINT_POSITION,
    JointVelocities: MotionGeneratorMode.JOINT_VELOCITY,
    CartesianPose: MotionGeneratorMode.CARTESIAN_POSITION,
    CartesianVelocities: MotionGeneratorMode.CARTESIAN_VELOCITY,
}


def motion_generator_mode(command: MotionCommand | type) -> MotionGeneratorMode:
    """Return the motion generator mode for a motion command or command type."""
    kind = command if isinstance(command, type) else type(command)
    try:
        return _MODES[kind]
    except KeyError:
        raise TypeError(f"{kind.__name__} is not a motion generator command") from None


_F = TypeVar("_F", bound=_Finishable)


def motion_finished(command: _F) -> _F:
    """Return a copy of the command that marks the motion as finished."""
    if not isinstance(command, _Finishable):
        raise TypeError(f"{type(command).__name__} cannot finish a motion")
    return dataclasses.replace(command, motion_finished=True)