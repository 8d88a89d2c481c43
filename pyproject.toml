[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmplescape"
version = "0.1.0"
description = "HTML escaping for template output and strict UTF-8 decoding of rendered byte buffers"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "escape", "xss", "template", "utf-8"]
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
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tmplescape"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
