[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysmonagent"
version = "0.1.0"
description = "Collect CPU, memory and network metrics from the local machine and print them periodically"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["monitoring", "metrics", "cpu", "memory", "network", "agent"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
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

[project.scripts]
sysmonagent = "sysmonagent.agent:main"
sysmonagent-server = "sysmonagent.server:main"

[tool.hatch.build.targets.wheel]
packages = ["sysmonagent"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
