[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usermgmt"
version = "1.0.0"
description = "A lightweight REST API for managing users with in-memory storage."
requires-python = ">=3.10"
keywords = ["rest", "api", "users", "crud", "flask", "swagger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
usermgmt = "usermgmt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["usermgmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
