[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neoframe"
version = "0.1.0"
description = "Frame, cursor and input logic for a graphical editor front end: easing, setting coercion, cursor and window animation, blink timing and key translation."
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "gui", "animation", "cursor", "easing", "keybindings"]
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
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["neoframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
