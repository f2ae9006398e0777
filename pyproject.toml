[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytesearch"
version = "0.1.0"
description = "Two-Way and Rabin-Karp substring search over arbitrary bytes, forwards and in reverse"
requires-python = ">=3.10"
dependencies = []
keywords = ["substring", "search", "bytes", "two-way", "rabin-karp", "prefilter"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bytesearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
