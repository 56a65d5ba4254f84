[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inttree"
version = "0.1.0"
description = "An unbalanced binary search tree of integers with an interactive shell for exploring it"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "binary search tree", "data structures", "teaching", "traversal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inttree = "inttree.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["inttree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
