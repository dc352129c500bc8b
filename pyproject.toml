[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pwvault"
version = "1.0.0"
description = "An encrypted, file-backed credential vault with password generation and strength scoring"
requires-python = ">=3.10"
keywords = ["password", "password-manager", "vault", "encryption", "aes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pwvault"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
