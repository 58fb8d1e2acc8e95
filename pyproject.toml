[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowcalc"
version = "0.1.0"
description = "Series-based sine, cosine, arcsine and arctangent with a keypad state machine and a text menu calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["trigonometry", "taylor-series", "maclaurin", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snowcalc = "snowcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snowcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
