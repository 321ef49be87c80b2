[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keystrike"
version = "0.1.0"
description = "Building blocks for a typing shooter: vectors, sprites, letter queues, input decoding, projectiles, scoring and highscores."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "typing", "arcade", "sprites", "highscores"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["keystrike"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
