[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexcast"
version = "1.0.0"
description = "Strict lexical conversions between text, integers, floats, characters and character arrays"
requires-python = ">=3.10"
dependencies = []
keywords = ["conversion", "parsing", "formatting", "lexical cast", "strings", "numbers"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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

[project.scripts]
lexcast-args = "lexcast.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["lexcast"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
