[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hallpath"
version = "0.1.0"
description = "Shortest walking routes between rooms and teachers on a school campus"
requires-python = ">=3.10"
keywords = ["shortest-path", "bellman-ford", "graph", "campus", "navigation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hallpath = "hallpath.campus:main"

[tool.hatch.build.targets.wheel]
packages = ["hallpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
