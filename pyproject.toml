[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kplfront"
version = "0.1.0"
description = "Front end for the KPL teaching language: scanner, symbol table and semantic checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["kpl", "compiler", "scanner", "lexer", "symbol-table", "semantic-analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kplfront"]

[tool.pytest.ini_options]
addopts = "-ra"
