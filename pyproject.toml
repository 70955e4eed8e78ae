[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antfarm"
version = "1.0.0"
description = "Route a colony of ants through a farm of rooms and tunnels in as few turns as possible"
requires-python = ">=3.10"
dependencies = []
keywords = ["ants", "graph", "pathfinding", "bfs", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
antfarm = "antfarm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["antfarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
