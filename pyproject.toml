[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "endkrypter"
version = "0.2.0"
description = "Interactive console tool for classic text ciphers and encodings: Caesar, Vigenere, ASCII codes, binary, Base64 and SHA-256"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "caesar",
    "vigenere",
    "cipher",
    "encryption",
    "binary",
    "ascii",
    "base64",
    "sha256",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
endkrypter = "endkrypter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["endkrypter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
