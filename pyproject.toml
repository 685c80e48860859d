[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "islandroutes"
version = "0.1.0"
description = "Shortest routes between islands connected by bridges, read from a plain-text map"
requires-python = ">=3.10"
dependencies = []
keywords = ["shortest-path", "floyd-warshall", "graph", "routes", "islands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
islandroutes = "islandroutes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["islandroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
