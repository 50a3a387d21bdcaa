[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krewkit"
version = "0.1.0"
description = "Building blocks for a kubectl plugin manager: fuzzy plugin search, user notices, PATH setup checks, release tag lookup and manifest platform validation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "kubectl",
    "kubernetes",
    "plugins",
    "plugin-manager",
    "fuzzy-search",
    "label-selector",
    "manifest-validation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["krewkit"]

[tool.hatch.build.targets.sdist]
include = ["krewkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
