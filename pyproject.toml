[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arraykit"
version = "0.1.0"
description = "Classic array algorithms: pair and triple sums, searching, in-place edits, ranking, grids and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "arrays", "two-sum", "permutations", "binary-search", "hourglass"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arraykit = "arraykit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arraykit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
