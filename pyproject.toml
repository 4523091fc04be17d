[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collectkit"
version = "0.1.0"
description = "Singly linked lists, stacks, and red-black tree tables and sets with comparator-based ordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "linked-list", "stack", "red-black-tree", "treeset", "treemap"]
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
packages = ["collectkit"]

[tool.pytest.ini_options]
addopts = "-ra"
