[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowcheck"
version = "1.0.0"
description = "Lightweight application-protocol detection and hostname extraction from packet payloads"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "network",
    "protocol-detection",
    "tls",
    "sni",
    "http",
    "packet",
    "traffic-analysis",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flowcheck"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
