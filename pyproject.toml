[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minheapq"
version = "0.1.0"
description = "A bounded integer min-heap priority queue with a line-oriented command interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "min-heap", "priority queue", "heapsort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
minheapq = "minheapq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minheapq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
