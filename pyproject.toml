[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastfss"
version = "0.1.0"
description = "Helpers for function secret sharing: an AES-128 counter-mode PRNG, a 128-bit unsigned integer and fixed-width wrapping arithmetic"
requires-python = ">=3.10"
keywords = ["function secret sharing", "mpc", "cryptography", "aes", "prng", "uint128"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fastfss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
