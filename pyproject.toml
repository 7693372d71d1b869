[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conststr"
version = "0.1.0"
description = "String operations with exact, byte-level semantics: case conversion, searching, comparison, UTF-8/UTF-16 encoding, debug escaping and hex decoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "case-conversion", "snake-case", "camel-case", "utf-8", "utf-16", "hex", "escape"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["conststr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
