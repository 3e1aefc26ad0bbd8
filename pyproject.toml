[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llist"
version = "0.1.0"
description = "Singly linked lists of floating-point numbers with element-wise arithmetic, splitting and quicksort"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "data structures", "quicksort", "permutations"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
llist-demo = "llist.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["llist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
