[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triplemath"
version = "0.1.0"
description = "A falling-shapes arithmetic puzzle game played on a small grid in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "arithmetic", "falling-blocks", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triplemath = "triplemath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["triplemath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
