[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipcidr"
version = "0.1.0"
description = "IP address and CIDR block parsing and arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "ip", "address", "cidr", "ipv4", "ipv6"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ipcidr"]

[tool.hatch.build.targets.sdist]
include = ["ipcidr", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
