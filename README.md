# armmotion

Building blocks for commanding a seven-joint robot arm. The package includes:

- a millisecond `Duration` type
- checks for elbow configurations and homogeneous transforms
- the arm's velocity, acceleration and jerk limits as constants
- typed motion commands
- gripper state records
- a joint-space point-to-point `MotionGenerator`
- a set of reference trajectories that are pure functions of time

The package has no dependencies outside the standard library.

## Installation

```
pip install armmotion
```

To run the test suite, install the `test` extra as well:

```
pip install "armmotion[test]"
pytest
```

## Durations

`armmotion.duration.Duration` counts whole, non-negative milliseconds. It is
immutable, hashable and ordered. It also supports the following arithmetic:

- `+` and `-` between durations. A negative result raises `ValueError`.
- `*` by an integer, on either side.
- `//` by a duration, which gives an integer.
- `//` by an integer, which gives a duration.
- `%` by a duration or by an integer.

```python
from datetime import timedelta
from armmotion.duration import Duration

period = Duration(4)
assert (period + Duration(3)).to_msec() == 7
assert (2 * period).to_msec() == 8
assert period // Duration(3) == 1
assert (period % 3).to_msec() == 1
assert period.to_sec() == 0.004
assert Duration(timedelta(seconds=1)).to_timedelta() == timedelta(seconds=1)
```

## Control tools

```python
from armmotion.control_tools import is_valid_elbow, is_homogeneous_transformation

identity = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]
assert is_homogeneous_transformation(identity)   # column-major 4x4
assert is_valid_elbow([0.3, -1.0])               # second value must be +1 or -1
```

Both functions raise `ValueError` when given the wrong number of values.

`has_realtime_kernel()` reports whether the running kernel is a realtime
kernel. It checks for `/sys/kernel/realtime` and always returns true on
Windows.

The module also defines the motion limits. Per-joint limits are tuples of
seven values:

- `MAX_TORQUE_RATE`
- `MAX_JOINT_JERK`
- `MAX_JOINT_ACCELERATION`
- `MAX_JOINT_VELOCITY`

Cartesian and elbow limits are scalars:

- `MAX_TRANSLATIONAL_*`
- `MAX_ROTATIONAL_*`
- `MAX_ELBOW_*`

It also defines these constants:

- `DELTA_T`
- `LIMIT_EPS`
- `NORM_EPS`
- `TOL_NUMBER_PACKETS_LOST`
- `FACTOR_CARTESIAN_ROTATION_POSE_INTERFACE`

## Commands

`armmotion.commands` holds frozen dataclasses for the commands an arm
accepts. Each one checks the number of values it is given:

- `JointPositions(q)`: 7 values.
- `JointVelocities(dq)`: 7 values.
- `CartesianPose(o_t_ee, elbow=None)`: 16 values, with an optional 2-value elbow.
- `CartesianVelocities(o_dp_ee, elbow=None)`: 6 values, with an optional 2-value elbow.
- `Torques(tau_j)`: 7 values.

Every command has a keyword-only `motion_finished` flag. The
`motion_finished(command)` function returns a copy of a command with that
flag set. `RobotCommand` bundles one command of each kind for logging. Its
defaults are zeros, with an identity pose for `cartesian_pose`.

`motion_generator_mode(command)` accepts a motion command or its type and
returns the matching `MotionGeneratorMode`. For anything else, including
`Torques`, it raises `TypeError`.

## States

`armmotion.states` holds frozen dataclasses:

- `GripperState`
- `VacuumGripperState`, whose `device_status` is a `VacuumGripperDeviceStatus` of `GREEN`, `YELLOW`, `ORANGE` or `RED`
- `VirtualWallCuboid`

Each gripper state renders itself as a JSON object with `to_json()`, which is
also what `str()` returns. The `time` field is written in seconds.

## Point-to-point joint motion

`armmotion.motion.MotionGenerator(speed_factor, q_goal)` plans a
synchronised, smooth move of all seven joints to a goal. Call it once per
control cycle with the current desired joint positions and the period since
the last call. The first call must pass `Duration(0)`, and the start is taken
from that call. Each call returns `JointPositions`, whose `motion_finished`
flag turns true once every joint has reached the goal.

```python
import math
from armmotion.duration import Duration
from armmotion.motion import MotionGenerator

goal = [0, -math.pi / 4, 0, -3 * math.pi / 4, 0, math.pi / 2, math.pi / 4]
generator = MotionGenerator(0.5, goal)

q_d = [0.0] * 7
command = generator(q_d, Duration(0))
while not command.motion_finished:
    command = generator(q_d, Duration(1))
assert all(abs(a - b) < 1e-9 for a, b in zip(command.q, goal))
```

## Reference trajectories

`armmotion.trajectories` evaluates the demonstration motions at a given time
in seconds since the motion started. The time must be finite and
non-negative. Each function returns the matching command type, marked
finished once the motion's duration is reached.

| Function | Returns | Duration |
|---|---|---|
| `cartesian_pose_motion(initial_pose, time)` | `CartesianPose` | 10 s |
| `cartesian_velocity_motion(time)` | `CartesianVelocities` | 8 s |
| `consecutive_joint_velocity_motion(time)` | `JointVelocities` | 8 s |
| `elbow_motion(initial_pose, initial_elbow, time)` | `CartesianPose` | 10 s |
| `joint_position_motion(initial_position, time)` | `JointPositions` | 5 s |
| `joint_velocity_motion(time)` | `JointVelocities` | 2 s |

`CollisionBehavior` groups the torque thresholds (7 values each) and the force
thresholds (6 values each). The module provides these ready-made settings:

- `DEFAULT_COLLISION_BEHAVIOR`
- `MOTION_COLLISION_BEHAVIOR`
- `CARTESIAN_VELOCITY_COLLISION_BEHAVIOR`
- `CONSECUTIVE_MOTION_COLLISION_BEHAVIOR`
- `DEFAULT_JOINT_IMPEDANCE`
- `DEFAULT_CARTESIAN_IMPEDANCE`
- `INITIAL_JOINT_CONFIGURATION`, the joint configuration the motions start from

## What this package does not do

- It does not talk to an arm or a gripper. It has no network connection, no
  real-time control loop and no way to send commands or settings such as
  collision behavior or impedance.
- It does not read robot states from the hardware.
- It does not compute kinematics or dynamics.
- It defines the motion limits as constants only and has no rate-limiting
  functions that apply them to commands.
- It installs no command-line programs.