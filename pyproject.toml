[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextionhmi"
version = "0.1.0"
description = "Component objects that drive a Nextion HMI touch display over a serial command link"
requires-python = ">=3.10"
dependencies = []
keywords = ["nextion", "hmi", "touch display", "serial", "embedded", "rtc"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nextionhmi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
