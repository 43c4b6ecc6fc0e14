[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfcount"
version = "0.1.0"
description = "Summarize terraform/terragrunt plan outputs by resource type and action"
requires-python = ">=3.10"
keywords = ["terraform", "terragrunt", "plan", "infrastructure", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Utilities",
]
dependencies = [
    "click",
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tfcount = "tfcount.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tfcount"]

[tool.pytest.ini_options]
addopts = "-ra"
