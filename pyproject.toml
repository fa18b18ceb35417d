[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmkit"
version = "0.1.0"
description = "Locate and fetch Substrate WASM runtimes from URLs, release tags or RPC nodes, and format their metadata and summaries"
requires-python = ">=3.10"
keywords = ["substrate", "wasm", "runtime", "metadata", "polkadot", "kusama", "rpc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = [
    "requests>=2.28",
    "semver>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
wasmkit = "wasmkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wasmkit"]

[tool.hatch.build.targets.sdist]
include = ["wasmkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
