[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplepgw"
version = "0.1.0"
description = "A minimal packet gateway model: APNs, PDN connections, bearers and uplink/downlink forwarding"
requires-python = ">=3.10"
dependencies = []
keywords = ["pgw", "gtp", "lte", "epc", "bearer", "pdn", "apn", "teid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simplepgw = "simplepgw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simplepgw"]

[tool.pytest.ini_options]
addopts = "-ra"
