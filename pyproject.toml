[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deltio"
version = "0.6.0"
description = "In-process Pub/Sub style topics, pulled-message tracking and flow control for local testing and CI"
requires-python = ">=3.10"
dependencies = []
keywords = ["pubsub", "emulator", "testing", "messaging", "asyncio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["deltio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
