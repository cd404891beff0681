[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trenchsolver"
version = "0.1.0"
description = "Solve the men-in-a-trench sliding puzzle with uniform cost search and A* heuristics"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "search", "a-star", "uniform-cost", "heuristics", "trench"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trenchsolver = "trenchsolver.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["trenchsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
