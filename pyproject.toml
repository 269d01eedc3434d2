[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkcommit"
version = "0.1.0"
description = "Damgard-Fujisaki integer commitments, zero-knowledge proofs over them, and anonymous credential attributes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "commitment",
    "zero-knowledge",
    "damgard-fujisaki",
    "range-proof",
    "anonymous-credentials",
]
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkcommit"]

[tool.pytest.ini_options]
addopts = "-ra"
