[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "movemutant"
version = "1.0.0"
description = "Mutation operators, reports and configuration for mutation testing of Move source code"
requires-python = ">=3.10"
dependencies = []
keywords = ["mutation-testing", "move", "mutants", "testing", "quality"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["movemutant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
