[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bankledger"
version = "0.1.0"
description = "Multi-currency bank account ledger that applies command files to checking and savings accounts"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "ledger", "accounts", "currency", "interest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankledger = "bankledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bankledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
