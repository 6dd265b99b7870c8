[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppmjoy"
version = "0.1.0"
description = "Decode RC receiver PPM pulse trains into joystick axis and button state"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "rc", "radio control", "joystick", "decoder"]
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
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ppmjoy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
