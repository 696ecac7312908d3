[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sollong"
version = "0.1.0"
description = "Map files for a tile-based coin-collecting game: loading, validation and the tile grid, with small text and buffer helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tiles", "map", "puzzle", "maze", "validation"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sollong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
