[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokerhistory"
version = "4.0.0"
description = "Open Hand History models and writing, plus simulated ICM tournament payouts for poker."
requires-python = ">=3.11"
dependencies = []
keywords = ["poker", "cards", "hand history", "ohh", "icm", "tournament"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pokerhistory"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
strict = true
