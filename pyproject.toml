[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "courtsim"
version = "0.1.0"
description = "A small courtroom model with judges, evidence, accused parties and lawyer strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "courtroom", "game", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
courtsim = "courtsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["courtsim"]

[tool.pytest.ini_options]
addopts = "-ra"
