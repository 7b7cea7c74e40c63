[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gluentmini"
version = "0.1.0"
description = "A small log pipeline that tails a file, keeps lines matching keywords, prints them and remembers its read offset."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["logging", "log shipping", "tail", "grep", "pipeline"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
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
test = [
    "pytest",
]

[project.scripts]
gluentmini = "gluentmini.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gluentmini"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
