[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sskv"
version = "0.1.0"
description = "A small pluggable key-value store with binary-sorted, tuple-structured keys and in-memory and SQLite backends."
requires-python = ">=3.10"
dependencies = []
keywords = ["kv", "key-value", "storage", "sqlite", "tuple-keys", "binary-keys"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sskv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
