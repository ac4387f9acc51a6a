[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socrypt"
version = "0.1.0"
description = "Pure-Python AES, the SHA-256 compression step and Classic McEliece arithmetic, plus bootloader configuration helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "sha256", "mceliece", "post-quantum", "goppa", "galois-field", "sorting-network", "bootloader"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["socrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
