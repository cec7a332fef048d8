[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit3611"
version = "0.1.0"
description = "Small algorithm toolkit: subsequence search, sort input sequences, a bidirectional graph and Bellman-Ford shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "graph", "bellman-ford", "string-matching", "shortest-path", "horspool"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["algokit3611"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
