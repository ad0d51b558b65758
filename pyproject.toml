[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booruprompt"
version = "0.1.0"
description = "Fuzzy string scorers (Indel, Damerau-Levenshtein, Jaro, prefix/postfix) and prompt extraction from image metadata"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "string matching", "indel", "damerau-levenshtein", "jaro", "prompt", "png", "exif"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["booruprompt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
