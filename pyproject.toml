[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hubbmnet"
version = "0.1.0"
description = "Command-driven simulator of a small layered network that splits messages into frames, routes them hop by hop and logs activity"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "simulation", "routing", "frames", "protocol stack"]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hubbmnet = "hubbmnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hubbmnet"]

[tool.pytest.ini_options]
addopts = "-ra"
