[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlists"
version = "0.1.0"
description = "Singly and doubly linked lists with search, sorting, de-duplication and integrity checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "singly linked list", "doubly linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainlists-demo = "chainlists.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
