[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evtr"
version = "0.1.0"
description = "Device discovery, selector and monitor state, and touch tracking models for inspecting Linux evdev input devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["evdev", "linux", "input", "touch", "joystick"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evtr"]

[tool.pytest.ini_options]
addopts = "-ra"
