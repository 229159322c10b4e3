[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blogservice"
version = "0.1.0"
description = "A small JSON blog-post HTTP service backed by a SQL database"
requires-python = ">=3.10"
keywords = ["blog", "rest", "json", "microservice", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
]
dependencies = [
    "flask>=2.2",
    "werkzeug>=2.2",
    "sqlalchemy>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
blogservice = "blogservice.server:main"

[tool.hatch.build.targets.wheel]
packages = ["blogservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
