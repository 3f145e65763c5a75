[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "algokit"
version = "0.1.0"
description = "Solutions to classic algorithm and contest problems: arithmetic, binary trees, grids, sequences and short contest tasks."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic programming", "backtracking", "binary trees", "competitive programming"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.setuptools.packages.find]
include = ["algokit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
