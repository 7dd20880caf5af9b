[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchymvc"
version = "1.0.0"
description = "A small model-view-controller application framework with name-keyed registries and a pygame front end"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["mvc", "framework", "pygame", "registry", "gui", "immediate-mode"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchymvc = "sketchymvc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchymvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
