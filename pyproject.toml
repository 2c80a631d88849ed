[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fifteensolve"
version = "0.1.0"
description = "Solve the 15-puzzle with IDA* using Manhattan distance, linear conflict and walking distance heuristics"
requires-python = ">=3.10"
dependencies = []
keywords = ["15-puzzle", "sliding puzzle", "ida-star", "heuristic search", "walking distance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
fifteensolve = "fifteensolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fifteensolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
