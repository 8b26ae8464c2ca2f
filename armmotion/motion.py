"""Synchronized point-to-point joint motion.

The profile follows Khalil and Dombre, *Modeling, Identification and
Control of Robots* (2002): every joint accelerates, cruises and decelerates
so that all joints reach their goals at the same time.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from armmotion.commands import JointPositions
from armmotion.duration import Duration

_JOINTS = 7
_DELTA_Q_MOTION_FINISHED = 1e-6
_DQ_MAX = (2.0, 2.0, 2.0, 2.0, 2.5, 2.5, 2.5)
_DDQ_MAX_START = (5.0,) * _JOINTS
_DDQ_MAX_GOAL = (5.0,) * _JOINTS


@dataclass
class _JointProfile:
    delta_q: float
    dq_max: float
    ddq_max_start: float
    ddq_max_goal: float
    dq_max_sync: float = 0.0
    t_1_sync: float = 0.0
    t_2_sync: float = 0.0
    t_f_sync: float = 0.0
    q_1: float = 0.0

    @property
    def sign(self) -> int:
        return (self.delta_q > 0) - (self.delta_q < 0)

    @property
    def moves(self) -> bool:
        return abs(self.delta_q) > _DELTA_Q_MOTION_FINISHED

    def unsynchronized_duration(self) -> float:
        """Duration of this joint's own fastest motion."""
        if not self.moves:
            return 0.0
        distance = abs(self.delta_q)
        dq_max_reach = self.dq_max
        reach_limit = 3.0 / 4.0 * (self.dq_max**2 / self.ddq_max_start) + 3.0 / 4.0 * (
            self.dq_max**2 / self.ddq_max_goal
        )
        if distance < reach_limit:
            dq_max_reach = math.sqrt(
                4.0
                / 3.0
                * self.delta_q
                * self.sign
                * (self.ddq_max_start * self.ddq_max_goal)
                / (self.ddq_max_start + self.ddq_max_goal)
            )
        t_1 = 1.5 * dq_max_reach / self.ddq_max_start
        delta_t_2 = 1.5 * dq_max_reach / self.ddq_max_goal
        return t_1 / 2.0 + delta_t_2 / 2.0 + distance / dq_max_reach

    def synchronize(self, total_time: float) -> None:
        """Stretch the profile so that it ends after ``total_time``."""
        if not self.moves:
            return
        a = 1.5 / 2.0 * (self.ddq_max_goal + self.ddq_max_start)
        b = -1.0 * total_time * self.ddq_max_goal * self.ddq_max_start
        c = abs(self.delta_q) * self.ddq_max_goal * self.ddq_max_start
        delta = max(b * b - 4.0 * a * c, 0.0)
        self.dq_max_sync = (-1.0 * b - math.sqrt(delta)) / (2.0 * a)
        self.t_1_sync = 1.5 * self.dq_max_sync / self.ddq_max_start
        delta_t_2_sync = 1.5 * self.dq_max_sync / self.ddq_max_goal
        self.t_f_sync = (
            self.t_1_sync / 2.0
            + delta_t_2_sync / 2.0
            + abs(self.delta_q / self.dq_max_sync)
        )
        self.t_2_sync = self.t_f_sync - delta_t_2_sync
        self.q_1 = self.dq_max_sync * self.sign * (0.5 * self.t_1_sync)

    def sample(self, t: float) -> tuple[float, bool]:
        """Return the offset from the start at time ``t`` and whether it is done."""
        if abs(self.delta_q) < _DELTA_Q_MOTION_FINISHED:
            return 0.0, True
        speed = self.dq_max_sync * self.sign
        t_1 = self.t_1_sync
        if t < t_1:
            return -1.0 / t_1**3 * speed * (0.5 * t - t_1) * t**3, False
        if t < self.t_2_sync:
            return self.q_1 + (t - t_1) * speed, False
        if t < self.t_f_sync:
            t_d = self.t_2_sync - t_1
            delta_t_2 = self.t_f_sync - self.t_2_sync
            shape = 1.0 / delta_t_2**3 * (t - t_1 - 2.0 * delta_t_2 - t_d) * (
                t - t_1 - t_d
            ) ** 3 + (2.0 * t - 2.0 * t_1 - delta_t_2 - 2.0 * t_d)
            return self.delta_q + 0.5 * shape * speed, False
        return self.delta_q, True


class MotionGenerator:
    """Moves all seven joints to a goal along a synchronized smooth profile.

    Call the instance once per control cycle with the last desired joint
    positions and the time elapsed since the previous call; the first call
    must pass a zero period.
    """

    def __init__(self, speed_factor: float, q_goal: Sequence[float]) -> None:
        if speed_factor <= 0.0:
            raise ValueError(f"speed_factor must be positive, got {speed_factor}")
        goal = tuple(float(value) for value in q_goal)
        if len(goal) != _JOINTS:
            raise ValueError(f"q_goal needs {_JOINTS} values, got {len(goal)}")
        self._q_goal = goal
        self._dq_max = tuple(limit * speed_factor for limit in _DQ_MAX)
        self._ddq_max_start = tuple(limit * speed_factor for limit in _DDQ_MAX_START)
        self._ddq_max_goal = tuple(limit * speed_factor for limit in _DDQ_MAX_GOAL)
        self._q_start: tuple[float, ...] = (0.0,) * _JOINTS
        self._profiles = self._plan((0.0,) * _JOINTS)
        self._time = 0.0

    def _plan(self, delta_q: Sequence[float]) -> list[_JointProfile]:
        profiles = [
            _JointProfile(delta, dq_max, start, goal)
            for delta, dq_max, start, goal in zip(
                delta_q, self._dq_max, self._ddq_max_start, self._ddq_max_goal
            )
        ]
        total_time = max(profile.unsynchronized_duration() for profile in profiles)
        for profile in profiles:
            profile.synchronize(total_time)
        return profiles

    def __call__(self, q_d: Sequence[float], period: Duration) -> JointPositions:
        """Return the joint positions to command for this cycle."""
        self._time += period.to_sec()

        if self._time == 0.0:
            start = tuple(float(value) for value in q_d)
            if len(start) != _JOINTS:
                raise ValueError(f"q_d needs {_JOINTS} values, got {len(start)}")
            self._q_start = start
            self._profiles = self._plan(
                [goal - begin for goal, begin in zip(self._q_goal, start)]
            )

        samples = [profile.sample(self._time) for profile in self._profiles]
        positions = tuple(
            begin + offset for begin, (offset, _) in zip(self._q_start, samples)
        )
        finished = all(done for _, done in samples)
        return JointPositions(positions, motion_finished=finished)