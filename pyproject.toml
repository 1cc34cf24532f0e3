[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpsolutions"
version = "0.1.0"
description = "Solutions to classic competitive-programming problems, with modular arithmetic and big-integer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "combinatorics",
    "number-theory",
    "big-integer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpsolutions = "cpsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpsolutions"]

[tool.hatch.build.targets.sdist]
include = ["cpsolutions", "tests", "pyproject.toml"]

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
