[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indentprint"
version = "1.0.0"
description = "Column-tracking text buffers, stream formatting helpers and a margin-aware pretty printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["pretty-print", "formatting", "indentation", "hex", "ansi"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["indentprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
