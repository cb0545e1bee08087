[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddsconv"
version = "0.1.0"
description = "Convert betting odds between American, decimal and fractional formats and compute implied probabilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["betting", "odds", "gambling", "conversion", "probability", "arbitrage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
oddsconv = "oddsconv.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["oddsconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
