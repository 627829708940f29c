[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "k256"
version = "0.1.0"
description = "Pure-Python group arithmetic on the secp256k1 elliptic curve"
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic-curve", "ecc", "cryptography", "sec1"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["k256"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
