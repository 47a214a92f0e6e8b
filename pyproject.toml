[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "celltable"
version = "0.1.0"
description = "Formatted text tables with borders, cell spans, alignment, padding and ANSI colours"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["table", "text", "terminal", "ascii", "unicode", "formatting", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["celltable"]

[tool.hatch.build.targets.sdist]
include = ["celltable", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
