[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubik"
version = "1.2.0"
description = "Rubik's cube model of any size, with move notation, a scrambler and a brute-force stage solver."
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "puzzle", "solver", "scrambler", "notation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
rubik-solver = "rubik.stages:main"
rubik-scrambler = "rubik.scrambler:main"

[tool.hatch.build.targets.wheel]
packages = ["rubik"]

[tool.pytest.ini_options]
addopts = "-ra"
