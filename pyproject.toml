[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bacalgo"
version = "0.1.0"
description = "Classic algorithms and containers: graph representations, sorting, dynamic programming, prefix-function search, a singly linked list and stdin multiplexing demos."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "sorting",
    "dynamic-programming",
    "knapsack",
    "levenshtein",
    "kmp",
    "linked-list",
    "selectors",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bacalgo-graphs = "bacalgo.graphs:main"
bacalgo-strings = "bacalgo.strings:main"
bacalgo-dynamic = "bacalgo.dynamic:main"
bacalgo-sorting = "bacalgo.sorting:main"
bacalgo-multiplexing = "bacalgo.multiplexing:main"

[tool.hatch.build.targets.wheel]
packages = ["bacalgo"]

[tool.hatch.build.targets.sdist]
include = ["bacalgo", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
