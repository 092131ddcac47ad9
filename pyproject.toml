[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sshwire"
version = "0.1.0"
description = "SSH transport-layer building blocks: packet framing, ciphers, key exchange and compression"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "ssh",
    "protocol",
    "curve25519",
    "chacha20-poly1305",
    "aes-gcm",
    "networking",
]
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
    "Topic :: System :: Networking",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["sshwire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
