[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellshell"
version = "0.1.0"
description = "A small interactive command shell with string, memory and list utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "builtins", "strings", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cellshell = "cellshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["cellshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
