[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todocsv"
version = "0.1.0"
description = "A small command-line todo list kept in a CSV file"
requires-python = ">=3.10"
keywords = ["todo", "tasks", "csv", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
todocsv = "todocsv.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todocsv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
