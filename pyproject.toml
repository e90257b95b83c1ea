[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listkit"
version = "0.1.0"
description = "Singly linked lists and bounded sequential lists, with small interactive shells for each"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "sequential list", "data structures", "shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listkit-chain = "listkit.chain_app:main"
listkit-linear = "listkit.linear_app:main"

[tool.hatch.build.targets.wheel]
packages = ["listkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
