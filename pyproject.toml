[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyprintf"
version = "0.1.0"
description = "A small printf-style formatter supporting the c, s, p, d, i, u, x, X and % conversions."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "format", "string"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["tinyprintf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
