[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "razertool"
version = "0.2.0"
description = "A simple command-line tool to inspect and configure Razer peripherals through their Linux sysfs attributes"
requires-python = ">=3.10"
dependencies = []
keywords = ["razer", "mouse", "dpi", "sysfs", "hid", "battery"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
razertool = "razertool.cli:main"

[tool.setuptools]
packages = ["razertool"]

[tool.pytest.ini_options]
addopts = "-ra"
