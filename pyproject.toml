[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsbkin"
version = "0.0.1"
description = "URDF element parsing, rigid-body geometry types, trajectory states and periodic loop timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "urdf", "kinematics", "quaternion", "timing"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["fsbkin"]

[tool.pytest.ini_options]
addopts = "-ra"
