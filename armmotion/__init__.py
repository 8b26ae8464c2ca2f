"""Durations, control checks and limits, motion commands, gripper states and joint and Cartesian trajectories for a seven-joint robot arm."""

__version__ = "0.9.2"

__all__ = [
    "commands",
    "control_tools",
    "duration",
    "motion",
    "states",
    "trajectories",
]