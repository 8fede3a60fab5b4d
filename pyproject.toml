[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bataille3d"
version = "1.0.0"
description = "Two-player battleship game on a three-level board, played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "game", "terminal", "board-game", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bataille3d = "bataille3d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bataille3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
