[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocktris"
version = "1.0.0"
description = "A falling-blocks puzzle game for the terminal"
requires-python = ">=3.10"
keywords = ["game", "terminal", "puzzle", "falling blocks", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
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
dependencies = [
    "blessed",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blocktris = "blocktris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blocktris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
