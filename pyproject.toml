[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem_gto"
version = "0.1.0"
description = "Game models of heads-up push/fold and 6-max preflop Texas Hold'em for CFR solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "holdem", "gto", "cfr", "game-theory", "preflop", "push-fold"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holdem_gto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
