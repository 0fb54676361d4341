[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cupds"
version = "0.1.0"
description = "Classic data structures and algorithms: searching, trees, heaps, lists, union-find and minimum spanning trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "red-black-tree",
    "avl-tree",
    "heap",
    "union-find",
    "fenwick-tree",
    "segment-tree",
    "linked-list",
    "minimum-spanning-tree",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
cupds-search = "cupds.search:main"
cupds-vector = "cupds.vector:main"
cupds-pq = "cupds.priority_queue:main"
cupds-listdemo = "cupds.listdemo:main"
cupds-bst = "cupds.bst:main"
cupds-avl = "cupds.avl:main"
cupds-segtree = "cupds.segtree:main"
cupds-bstgeneric = "cupds.bstgeneric:main"
cupds-mst = "cupds.mst:main"

[tool.hatch.build.targets.wheel]
packages = ["cupds"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
