[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melpc"
version = "0.1.0"
description = "Lexer, syntax tree and LLVM IR text generator for the MELP teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "llvm", "llvm-ir", "code-generation", "melp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["melpc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
