[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motivar"
version = "0.1.0"
description = "Print a random motivational quote in Portuguese or English, with quotes you can add from CSV or JSON sources."
requires-python = ">=3.10"
dependencies = []
keywords = ["quotes", "motivation", "fortune", "cli", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Fortune Cookies",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
motivar = "motivar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["motivar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
