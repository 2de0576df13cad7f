[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibomber"
version = "0.1.0"
description = "A small Bomberman-like tile game: map parsing, enemy movement, bombs, a pixel canvas and a terminal player"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "bomberman", "arcade", "tile-map", "ber"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibomber = "minibomber.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minibomber"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
