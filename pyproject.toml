[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dec128"
version = "0.1.0"
description = "A decimal type with a 96-bit mantissa, a scale of 0 to 28 and a sign, with banker's rounding, comparison and conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "arithmetic", "rounding", "banker's rounding"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dec128"]

[tool.pytest.ini_options]
addopts = "-ra"
