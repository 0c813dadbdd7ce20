[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taquin"
version = "1.0.0"
description = "A sliding-tile picture puzzle with keyboard and mouse play"
requires-python = ">=3.10"
keywords = ["taquin", "sliding puzzle", "15 puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taquin = "taquin.app:main"

[tool.hatch.build.targets.wheel]
packages = ["taquin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
