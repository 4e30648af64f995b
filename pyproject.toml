[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proctinet"
version = "0.1.0"
description = "Interactive installer that sets up and configures the Suricata IDS for ProctiNet"
requires-python = ">=3.10"
keywords = ["suricata", "ids", "installer", "network", "security", "botnet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Installation/Setup",
]
dependencies = [
    "psutil",
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
proctinet = "proctinet.installer:main"

[tool.hatch.build.targets.wheel]
packages = ["proctinet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
