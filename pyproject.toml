[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursus"
version = "0.1.0"
description = "Classic systems-programming exercises: string, memory and list helpers, a buffered line reader, bit framing for signal messages and a two-stack sorter."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "linked-list",
    "line-reader",
    "bit-framing",
    "push-swap",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "cursus.pushswap.sorter:main"

[tool.hatch.build.targets.wheel]
packages = ["cursus"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
