[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katabox"
version = "0.1.0"
description = "Small coding katas: tennis scoring, an ALU, Wheel of Fortune, string sums, video rental statements and warm-up exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["kata", "refactoring", "exercises", "tdd", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["katabox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
