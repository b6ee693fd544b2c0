[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "earnsurprise"
version = "0.1.0"
description = "Earnings-surprise event study: abnormal returns, bootstrapped AAR/CAAR and CAAR plots"
requires-python = ">=3.10"
keywords = ["finance", "event study", "earnings", "abnormal returns", "bootstrap", "CAAR"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["earnsurprise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
