[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustdrill"
version = "5.0.0"
description = "Small exercises and a runner that compiles, tests and tracks progress through them"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "education", "rustc", "clippy", "watch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustdrill = "rustdrill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rustdrill"]

[tool.pytest.ini_options]
addopts = "-ra"
