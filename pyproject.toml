[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digestkit"
version = "0.10.3"
description = "Building blocks for hash functions and message authentication codes: block buffering, fixed, variable and extendable output, constant-time tag checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["digest", "hash", "mac", "xof", "cryptography", "block-buffer"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["digestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
