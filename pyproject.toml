[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemonsqueezy"
version = "0.1.0"
description = "Client for the Lemon Squeezy REST API, with JSON:API dataclass models and webhook signature verification"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["lemonsqueezy", "payments", "subscriptions", "webhooks", "json-api", "api-client"]
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
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["lemonsqueezy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
