[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynaprog"
version = "0.1.0"
description = "Classic dynamic-programming algorithms on sequences, strings, grids and recurrences"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "algorithms",
    "subsequence",
    "edit distance",
    "palindrome",
    "median",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["dynaprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
