[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Number theory, prime sieves, binary search and container helpers, plus two small contest solvers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "number-theory",
    "gcd",
    "modular-arithmetic",
    "chinese-remainder-theorem",
    "sieve",
    "binary-search",
    "heap",
    "multimap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-carsell = "algokit.codechef:carsell_main"
algokit-covid = "algokit.codechef:covid_main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
