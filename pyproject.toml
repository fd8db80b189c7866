[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniprintf"
version = "0.1.0"
description = "A small printf-style formatter supporting %c, %s, %d, %i, %u, %x, %X, %p and %%."
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "text", "hexadecimal"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["miniprintf"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
