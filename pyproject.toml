[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weekalarm"
version = "0.1.0"
description = "Console alarm clock with a four-week rotating schedule stored in a JSON file"
requires-python = ">=3.10"
dependencies = []
keywords = ["alarm", "alarm clock", "schedule", "weekly rotation", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weekalarm = "weekalarm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["weekalarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
