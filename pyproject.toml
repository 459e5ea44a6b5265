[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustgene"
version = "0.1.0"
description = "Find the best four-seed crossbreeding layout for Rust plant genes"
requires-python = ">=3.10"
dependencies = []
keywords = ["rust", "genetics", "crossbreeding", "farming", "seeds", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rustgene = "rustgene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rustgene"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
