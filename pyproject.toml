[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apidocgen"
version = "0.6.0"
description = "Describe web handler inputs and outputs as OpenAPI 3.0 schemas, parameters, request bodies and responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["openapi", "oas3", "documentation", "json-schema", "api"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["apidocgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
