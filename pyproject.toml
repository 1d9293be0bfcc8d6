[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numbig"
version = "0.1.0"
description = "Arbitrary-precision integer helpers: truncating and floored division, two's-complement bits, radix and byte conversions, modular arithmetic and random generation"
requires-python = ">=3.10"
keywords = ["bigint", "arbitrary precision", "integer", "number theory", "modular arithmetic", "radix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["numbig"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
