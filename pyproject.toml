[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spantrace"
version = "0.1.0"
description = "Building blocks for tracing: span records, samplers, span processors and exporters."
requires-python = ">=3.10"
dependencies = []
keywords = ["tracing", "spans", "sampling", "telemetry", "observability"]
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
    "Topic :: System :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spantrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
