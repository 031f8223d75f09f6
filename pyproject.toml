[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "junqi"
version = "0.1.0"
description = "Dark Junqi (flip-and-fight army chess) game logic with an easy and a difficult computer opponent"
requires-python = ">=3.10"
dependencies = []
keywords = ["junqi", "army chess", "board game", "dark chess", "game ai"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["junqi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
