[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent_solutions"
version = "0.1.0"
description = "Daily puzzle solutions with a runner for solving and timing each day"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent", "puzzles", "solutions", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
advent-solutions = "advent_solutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent_solutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
