[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mylog"
version = "1.0.0"
description = "Small thread-safe logging library with importance filtering and file or TCP socket sinks"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log", "sink", "socket", "thread-safe"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mylog-demo = "mylog.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["mylog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
