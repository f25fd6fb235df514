[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voidshell"
version = "0.1.0"
description = "Core pieces of a small POSIX-style shell: variable table, command tree nodes, builtins and line reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "environment", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voidshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
