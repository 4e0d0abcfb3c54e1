[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solrinplace"
version = "0.1.0"
description = "Build Solr JSON update batches from CSV data, using in-place updates where possible"
requires-python = ">=3.10"
dependencies = []
keywords = ["solr", "csv", "in-place update", "atomic update", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solrinplace = "solrinplace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["solrinplace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
