[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enemidx"
version = "0.1.0"
description = "In-memory indexes for querying ENEM microdata CSV files by registration number, essay grade and test city"
requires-python = ">=3.10"
dependencies = []
keywords = ["enem", "microdata", "csv", "index"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enemidx = "enemidx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enemidx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
