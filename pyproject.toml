[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "erdtree"
version = "3.1.0"
description = "Filesystem and disk usage building blocks: size metrics, unit prefixes, permission strings, file icons and rc configuration loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "ls", "du", "disk-usage", "filesystem", "permissions", "icons"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["erdtree"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
