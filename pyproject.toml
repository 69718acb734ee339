[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hjeditor"
version = "0.1.0"
description = "Headless core of a small code editor: syntax highlighting, keyword completion, smart editing, find/replace and file sessions"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "syntax-highlighting", "completion", "levenshtein", "find-replace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hjeditor"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
