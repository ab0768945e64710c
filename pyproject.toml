[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genericds"
version = "0.1.0"
description = "Container types, 64-bit hash functions, a growable string and a small automaton-based regular expression engine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "hashset",
    "hashmap",
    "binary heap",
    "queue",
    "stack",
    "regex",
    "automata",
    "murmurhash",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
genericds-demo = "genericds.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["genericds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
