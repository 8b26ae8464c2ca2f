[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "armmotion"
version = "0.9.2"
description = "Motion generation, motion limits and state types for a seven-joint robot arm"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "motion", "trajectory", "robot arm", "control"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["armmotion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
