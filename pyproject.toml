[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typesafety"
version = "0.1.0"
description = "Small, explicit building blocks for safer code: constraints, references, output parameters and variants."
requires-python = ">=3.10"
dependencies = []
keywords = ["constraints", "interval", "variant", "tagged-union", "reference", "output-parameter"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["typesafety"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
