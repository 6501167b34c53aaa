[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cubescape"
version = "0.1.0"
description = "Core of a first-person maze game: .cub scene parsing, XPM images, an event-loop model and game logic."
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "game", "map-parser", "first-person", "event-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["cubescape*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
