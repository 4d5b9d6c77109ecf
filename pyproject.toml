[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotron"
version = "0.1.0"
description = "Game logic for an arena shooter: enemies, family members, bullets, sprite animation and collision"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "enemy-ai", "sprites"]
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
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robotron"]

[tool.pytest.ini_options]
addopts = "-ra"
