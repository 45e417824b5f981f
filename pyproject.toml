[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tellerbook"
version = "0.1.0"
description = "A small in-memory ledger of savings, checking and business accounts with an interactive teller menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "ledger", "savings", "checking", "teller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
tellerbook = "tellerbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tellerbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
