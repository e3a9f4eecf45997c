[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcss_sidecar"
version = "0.1.0"
description = "Configuration, match-status tracking and reply matching for a RoboCup soccer simulator sidecar"
requires-python = ">=3.10"
dependencies = []
keywords = ["robocup", "soccer", "simulation", "rcssserver", "sidecar", "trainer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["rcss_sidecar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
