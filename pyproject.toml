[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solsysvar"
version = "0.8.4"
description = "Pure-Python models of cluster sysvars (clock, fees, rent, instruction introspection) and program address helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sysvar", "rent", "clock", "pda", "pubkey", "base58", "instructions"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solsysvar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
