[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uebernotes"
version = "0.1.0"
description = "Note-taking app for specific purposes: books of notes kept in SQLite, with a command line and a terminal interface"
requires-python = ">=3.10"
keywords = ["notes", "note-taking", "sqlite", "cli", "tui", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uebernotes = "uebernotes.app:main"

[tool.hatch.build.targets.wheel]
packages = ["uebernotes"]

[tool.pytest.ini_options]
addopts = "-ra"
