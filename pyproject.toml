[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shiftcrypt"
version = "0.1.0"
description = "Encrypt or decrypt every file under a directory in place with a byte-shift cipher, using a pool of worker threads."
requires-python = ">=3.10"
dependencies = []
keywords = ["encryption", "decryption", "caesar", "byte-shift", "files", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shiftcrypt = "shiftcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shiftcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
