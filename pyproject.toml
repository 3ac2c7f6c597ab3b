[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gestmag"
version = "0.1.0"
description = "Store, order, product and fitting-room management backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["retail", "stores", "orders", "inventory", "sqlite", "recommendation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gestmag = "gestmag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gestmag"]

[tool.pytest.ini_options]
addopts = "-ra"
