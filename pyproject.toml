[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reqkit"
version = "0.1.0"
description = "Building blocks for HTTP clients: header and cookie parsing, URL encoding, request options, multipart parts and a resizable thread pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "headers", "cookies", "multipart", "threadpool", "url-encoding", "byte-range"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reqkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
