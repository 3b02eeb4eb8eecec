[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkfuzz"
version = "2.2.1"
description = "Path coverage tracking and debuggable syntax trees for ZK circuit fuzzing"
requires-python = ">=3.10"
keywords = ["fuzzing", "security", "zero-knowledge-proof", "zkp", "coverage", "ast"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Topic :: Security",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkfuzz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
