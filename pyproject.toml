[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wassemble"
version = "0.1.0"
description = "Small typed clients for the Discord, GitHub and OpenAI HTTP APIs"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["discord", "github", "openai", "api", "client", "http", "rest"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["wassemble"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
