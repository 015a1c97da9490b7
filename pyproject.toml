[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftselect"
version = "0.1.0"
description = "Interactive terminal picker: choose among command-line arguments and print the selection"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "select", "picker", "terminfo", "tty", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Terminals",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftselect = "ftselect.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["ftselect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
