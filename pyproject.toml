[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gameball"
version = "0.1.0"
description = "Rigid-body physics and fixed-tick game logic for a rolling-ball game"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "rigid body", "collision", "game", "simulation", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["gameball*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
