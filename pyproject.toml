[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barstats"
version = "0.6.4"
description = "System statistics rendered as status-bar event payloads."
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status bar", "system stats", "monitoring", "cpu", "memory", "disk", "network"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["barstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
