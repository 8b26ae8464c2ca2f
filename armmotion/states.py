"""State snapshots of the grippers and parameters of virtual walls."""

from __future__ import annotations

import enum
import json
from collections.abc import Sequence
from dataclasses import dataclass, field

from armmotion.duration import Duration

_UINT16_MAX = 0xFFFF
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must lie in [{low}, {high}], got {value}")


def _as_duration(value: Duration | int) -> Duration:
    return value if isinstance(value, Duration) else Duration(value)


def _float_tuple(name: str, values: Sequence[float], size: int) -> tuple[float, ...]:
    result = tuple(float(value) for value in values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} values, got {len(result)}")
    return result


@dataclass(frozen=True)
class GripperState:
    """State of the two-finger gripper."""

    width: float = 0.0
    """Current opening width in metres."""
    max_width: float = 0.0
    """Maximum opening width in metres, estimated by homing."""
    is_grasped: bool = False
    """Whether an object is currently grasped."""
    temperature: int = 0
    """Gripper temperature in degrees Celsius."""
    time: Duration = field(default_factory=Duration)
    """Strictly monotonically increasing timestamp since robot start."""

    def __post_init__(self) -> None:
        _check_range("temperature", self.temperature, 0, _UINT16_MAX)
        object.__setattr__(self, "time", _as_duration(self.time))

    def to_json(self) -> str:
        """Return the state as a JSON object, fields in declaration order."""
        return json.dumps(
            {
                "width": self.width,
                "max_width": self.max_width,
                "is_grasped": self.is_grasped,
                "temperature": self.temperature,
                "time": self.time.to_sec(),
            }
        )

    def __str__(self) -> str:
        return self.to_json()


class VacuumGripperDeviceStatus(enum.IntEnum):
    """Health of the vacuum gripper device."""

    GREEN = 0
    """Working optimally."""
    YELLOW = 1
    """Working, with warnings."""
    ORANGE = 2
    """Working, with severe warnings."""
    RED = 3
    """Not working properly."""


@dataclass(frozen=True)
class VacuumGripperState:
    """State of the vacuum gripper."""

    in_control_range: bool = False
    """Vacuum value lies within the setpoint area."""
    part_detached: bool = False
    """The part has been detached after a suction cycle."""
    part_present: bool = False
    """Vacuum is over H2 and not yet under H2-h2."""
    device_status: VacuumGripperDeviceStatus = VacuumGripperDeviceStatus.GREEN
    actual_power: int = 0
    """Actual power in percent."""
    vacuum: int = 0
    """System vacuum in mbar."""
    time: Duration = field(default_factory=Duration)
    """Strictly monotonically increasing timestamp since robot start."""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "device_status", VacuumGripperDeviceStatus(self.device_status)
        )
        _check_range("actual_power", self.actual_power, 0, _UINT16_MAX)
        _check_range("vacuum", self.vacuum, 0, _UINT16_MAX)
        object.__setattr__(self, "time", _as_duration(self.time))

    def to_json(self) -> str:
        """Return the state as a JSON object, fields in declaration order."""
        return json.dumps(
            {
                "in_control_range": self.in_control_range,
                "part_detached": self.part_detached,
                "part_present": self.part_present,
                "device_status": self.device_status.name.lower(),
                "actual_power": self.actual_power,
                "vacuum": self.vacuum,
                "time": self.time.to_sec(),
            }
        )

    def __str__(self) -> str:
        return self.to_json()


@dataclass(frozen=True)
class VirtualWallCuboid:
    """A cuboid used as a virtual wall."""

    id: int
    """Identifier of the wall."""
    object_world_size: tuple[float, ...]
    """Corner point of the cuboid in the world frame, in metres."""
    p_frame: tuple[float, ...]
    """4x4 transformation matrix, column-major."""
    active: bool
    """Whether this Cartesian limit is active."""

    def __post_init__(self) -> None:
        _check_range("id", self.id, _INT32_MIN, _INT32_MAX)
        object.__setattr__(
            self,
            "object_world_size",
            _float_tuple("object_world_size", self.object_world_size, 3),
        )
        object.__setattr__(self, "p_frame", _float_tuple("p_frame", self.p_frame, 16))