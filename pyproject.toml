[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slushfind"
version = "0.1.0"
description = "Search the SLH-DSA parameter space for sets with reduced signature limits"
requires-python = ">=3.10"
keywords = ["slh-dsa", "sphincs", "post-quantum", "signatures", "parameters"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "tabulate",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slushfind = "slushfind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slushfind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
