[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tlswire"
version = "0.1.0"
description = "Encoding and decoding of TLS 1.3 wire structures: alerts, record codes and extension payloads"
requires-python = ">=3.10"
dependencies = []
keywords = ["tls", "tls13", "wire-format", "protocol", "parsing", "encoding"]
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
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tlswire"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
