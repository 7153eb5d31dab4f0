[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cifras"
version = "0.1.0"
description = "Caesar and columnar transposition ciphers with brute-force and frequency-analysis attacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "caesar", "transposition", "cryptanalysis", "frequency analysis", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cifra-cesar = "cifras.caesar_menu:main"
cifra-transposicao = "cifras.transposition_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["cifras"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
