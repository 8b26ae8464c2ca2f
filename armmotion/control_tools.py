"""Helpers for control loops, and the motion limits of the arm."""

from __future__ import annotations

import math
import os
import sys
from collections.abc import Sequence
from pathlib import Path

_REALTIME_PATH = Path("/sys/kernel/realtime")

_ORTHONORMAL_THRESHOLD = 1e-5

# Sample time in seconds.
DELTA_T = 1e-3
# Margin kept below every hardware limit.
LIMIT_EPS = 1e-3
# Threshold below which Cartesian accelerations and jerks are left unlimited.
NORM_EPS = sys.float_info.epsilon
# Lost packets tolerated when deriving velocity limits (constant acceleration model).
TOL_NUMBER_PACKETS_LOST = 3.0
# Factor for rotational limits with the Cartesian pose interface.
FACTOR_CARTESIAN_ROTATION_POSE_INTERFACE = 0.99

MAX_TORQUE_RATE: tuple[float, ...] = tuple(1000 - LIMIT_EPS for _ in range(7))

MAX_JOINT_JERK: tuple[float, ...] = tuple(
    limit - LIMIT_EPS
    for limit in (7500.0, 3750.0, 5000.0, 6250.0, 7500.0, 10000.0, 10000.0)
)

MAX_JOINT_ACCELERATION: tuple[float, ...] = tuple(
    limit - LIMIT_EPS for limit in (15.0, 7.5, 10.0, 12.5, 15.0, 20.0, 20.0)
)

MAX_JOINT_VELOCITY: tuple[float, ...] = tuple(
    limit - LIMIT_EPS - TOL_NUMBER_PACKETS_LOST * DELTA_T * acceleration
    for limit, acceleration in zip(
        (2.1750, 2.1750, 2.1750, 2.1750, 2.6100, 2.6100, 2.6100),
        MAX_JOINT_ACCELERATION,
    )
)

MAX_TRANSLATIONAL_JERK = 6500.0 - LIMIT_EPS
MAX_TRANSLATIONAL_ACCELERATION = 13.0 - LIMIT_EPS
MAX_TRANSLATIONAL_VELOCITY = (
    2.0 - LIMIT_EPS - TOL_NUMBER_PACKETS_LOST * DELTA_T * MAX_TRANSLATIONAL_ACCELERATION
)

MAX_ROTATIONAL_JERK = 12500.0 - LIMIT_EPS
MAX_ROTATIONAL_ACCELERATION = 25.0 - LIMIT_EPS
MAX_ROTATIONAL_VELOCITY = (
    2.5 - LIMIT_EPS - TOL_NUMBER_PACKETS_LOST * DELTA_T * MAX_ROTATIONAL_ACCELERATION
)

MAX_ELBOW_JERK = 5000 - LIMIT_EPS
MAX_ELBOW_ACCELERATION = 10.0 - LIMIT_EPS
MAX_ELBOW_VELOCITY = (
    2.1750 - LIMIT_EPS - TOL_NUMBER_PACKETS_LOST * DELTA_T * MAX_ELBOW_ACCELERATION
)


def is_valid_elbow(elbow: Sequence[float]) -> bool:
    """Return whether an elbow configuration has a valid sign (+1 or -1)."""
    if len(elbow) != 2:
        raise ValueError(f"elbow needs 2 values, got {len(elbow)}")
    return elbow[1] in (-1.0, 1.0)


def is_homogeneous_transformation(transform: Sequence[float]) -> bool:
    """Return whether a column-major 4x4 matrix is a homogeneous transformation."""
    if len(transform) != 16:
        raise ValueError(f"transform needs 16 values, got {len(transform)}")

    if (transform[3], transform[7], transform[11], transform[15]) != (0.0, 0.0, 0.0, 1.0):
        return False

    columns = (transform[column * 4 : column * 4 + 3] for column in range(3))
    rows = (transform[row : 12 : 4] for row in range(3))
    return all(
        abs(math.hypot(*vector) - 1.0) <= _ORTHONORMAL_THRESHOLD
        for vector in (*columns, *rows)
    )


def has_realtime_kernel() -> bool:
    """Return whether the running kernel is a realtime kernel.

    On Windows this is always true; elsewhere it checks for
    ``/sys/kernel/realtime``.
    """
    if sys.platform.startswith("win"):
        return True
    return os.path.exists(_REALTIME_PATH)