[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "relayboard"
version = "0.2.2"
description = "Control logic for a relay board node: shutter driver, button and wind observers, software timers, clock, system state, CAN data types and bit helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "home-automation",
    "relay",
    "shutter",
    "can",
    "vscp",
    "state-machine",
    "timer",
]
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
    "Topic :: Home Automation",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Embedded Systems :: Controller Area Network (CAN)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["relayboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
