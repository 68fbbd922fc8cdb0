[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegame"
version = "0.1.0"
description = "Conway's Game of Life with a pattern library, a graphical board and a terminal control menu"
requires-python = ">=3.10"
keywords = ["game of life", "cellular automaton", "conway", "simulation", "pygame", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifegame = "lifegame.main:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
