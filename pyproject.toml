[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poolmath"
version = "0.5.0"
description = "Integer fixed-point math for concentrated-liquidity pools: tick prices, token deltas, swap steps, fee and reward growth"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "concentrated-liquidity", "fixed-point", "swap", "liquidity", "u256"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["poolmath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
