[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bulmakit"
version = "0.1.0"
description = "Bulma CSS components as composable Python objects that render to HTML."
requires-python = ">=3.10"
dependencies = []
keywords = ["bulma", "css", "html", "components", "widgets", "ui"]
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
    "Topic :: Software Development :: Widget Sets",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bulmakit-demo = "bulmakit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bulmakit"]

[tool.hatch.build.targets.sdist]
include = ["bulmakit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
