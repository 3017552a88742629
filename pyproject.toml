[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletfw"
version = "0.1.0"
description = "In-memory model of a small hardware wallet's display, screen layouts, random numbers, flash layout and transaction serialization"
requires-python = ">=3.10"
keywords = ["oled", "framebuffer", "bitmap-font", "bitcoin", "transaction", "multisig", "firmware"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["walletfw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
