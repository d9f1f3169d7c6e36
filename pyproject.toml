[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostructs"
version = "1.2.0"
description = "Classic data structures: double-ended queue, sorted array, red-black tree, hash set, singly-linked list and trie."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "queue",
    "deque",
    "red-black-tree",
    "trie",
    "hash-set",
    "linked-list",
    "sorted-array",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algostructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
