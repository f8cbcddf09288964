[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellcli"
version = "2.0.2"
description = "Line-oriented command interpreter with abbreviated command names, typed arguments and queued errors"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "parser", "console", "interpreter"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cellcli"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 110
target-version = "py310"
