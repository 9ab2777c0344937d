[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wake"
version = "0.1.0"
description = "Data cells, schemas, messages and channels for a streaming query engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "query", "streaming", "dataflow", "tpch", "channels"]
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
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
