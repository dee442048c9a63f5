[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidikit"
version = "0.1.0"
description = "Building blocks of the Unicode bidirectional algorithm: bidi types, run lists, Arabic joining and bidi mark removal"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "bidi", "bidirectional", "arabic", "hebrew", "joining", "rtl"]
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
    "Topic :: Software Development :: Internationalization",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bidikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
