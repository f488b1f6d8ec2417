[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockfloyd"
version = "0.1.0"
description = "All-pairs shortest paths with a block-partitioned Floyd-Warshall over a square process grid"
requires-python = ">=3.10"
keywords = ["floyd-warshall", "shortest-paths", "graph", "adjacency-matrix", "checkerboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockfloyd = "blockfloyd.shortest:main"
blockfloyd-generate = "blockfloyd.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["blockfloyd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
