[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectlib"
version = "0.1.0"
description = "Small building blocks for interactive apps: vector and matrix math, ring buffers, audio delay, shader source loading, a thread pool, logging and profiling."
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "vectors", "matrices", "quaternion", "ring-buffer", "audio", "shader", "thread-pool", "logging"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["connectlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
