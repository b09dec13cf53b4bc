[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dir2prompt"
version = "0.1.0"
description = "Scan a directory and write the contents of matching text files as a single document"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["prompt", "context", "directory", "glob", "code-analysis"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dir2prompt = "dir2prompt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dir2prompt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
