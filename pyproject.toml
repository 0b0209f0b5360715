[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robutils"
version = "0.1.0"
description = "Small utility toolkit: thread-local error state, a capacity-tracked string map, simple containers, and path, environment and formatting helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "string-map", "error-handling", "filesystem", "environment"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robutils"]

[tool.pytest.ini_options]
addopts = "-ra"
