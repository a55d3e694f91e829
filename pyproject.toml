[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "percolate"
version = "0.1.0"
description = "Building blocks for learning to dismantle networks: graphs, batch message-passing matrices, an episode environment and n-step replay memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "percolation", "network dismantling", "reinforcement learning", "replay memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["percolate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
