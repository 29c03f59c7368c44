[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic data structures and algorithms: stacks, heaps, balanced trees, treaps, hashing and sorting, with command-line drivers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "heap",
    "treap",
    "avl-tree",
    "hashing",
    "sorting",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algokit-stack = "algokit.stack:main"
algokit-minqueue = "algokit.minqueue:main"
algokit-brackets = "algokit.brackets:main"
algokit-minmax-heap = "algokit.minmax_heap:main"
algokit-cartesian = "algokit.cartesian:main"
algokit-indexed-heap = "algokit.indexed_heap:main"
algokit-hashset = "algokit.hashset:main"
algokit-avl = "algokit.avl:main"
algokit-sum-treap = "algokit.sum_treap:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = ["algokit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
