[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainlists"
version = "0.1.0"
description = "Singly and doubly linked lists that hold arbitrary Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "data structures", "collections"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
chainlists-demo = "chainlists.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chainlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
