[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burbir"
version = "0.1.0"
description = "Data structures for a small terminal social network: word reading, profiles, friend graphs and groups, request queues, tweets, hashtag maps, lists and matrices."
requires-python = ">=3.10"
keywords = [
    "data-structures",
    "social-network",
    "queue",
    "priority-queue",
    "graph",
    "disjoint-set",
    "hash-map",
    "matrix",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["burbir"]

[tool.pytest.ini_options]
addopts = "-ra"
