[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clicker"
version = "0.1.0"
description = "A small incremental clicker game: click for money, buy buildings that earn more."
requires-python = ">=3.10"
keywords = ["game", "clicker", "incremental", "idle", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
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
clicker = "clicker.window:main"

[tool.hatch.build.targets.wheel]
packages = ["clicker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
