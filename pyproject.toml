[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpleserialize"
version = "0.8.0"
description = "Simple Serialize (SSZ): encoding, decoding and Merkle hash tree roots for typed values"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssz", "serialization", "merkle", "hash-tree-root", "ethereum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simpleserialize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
