[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eya"
version = "1.0.0"
description = "Numeric limits, error records, byte-buffer utilities and typed dynamic arrays"
requires-python = ">=3.10"
dependencies = []
keywords = ["memory", "buffer", "array", "numeric-limits", "error"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eya"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
