[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrispec"
version = "0.1.0"
description = "Tetrimino file checker and settings inspector for a terminal Tetris, with a debug report of keys, level, map size and pieces"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "tetrimino", "puzzle", "game", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
tetrispec = "tetrispec.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tetrispec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
