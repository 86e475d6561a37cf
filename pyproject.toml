[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lancerledger"
version = "0.1.0"
description = "An in-memory freelance job ledger: jobs, proposals and agreements behind a compact binary call interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["freelance", "jobs", "proposals", "agreements", "ledger", "contract"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lancerledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
