[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backseat-collector"
version = "0.1.0"
description = "A drone simulation in which pluggable brain modules steer drones through a small host API"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "drones", "game", "brain", "sandbox", "host-api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
backseat-collector = "backseat_collector.app:main"

[tool.hatch.build.targets.wheel]
packages = ["backseat_collector"]

[tool.hatch.build.targets.sdist]
include = ["backseat_collector", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
