[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopractice"
version = "0.1.0"
description = "Small worked programs: sorting, a calculator, a music library, an in-process game server, network and hashing tools, primes, a TLS echo pair and a photo upload site."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = [
    "education",
    "examples",
    "sorting",
    "ipc",
    "icmp",
    "tls",
    "hashing",
    "flask",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gopractice-sorter = "gopractice.sorter:main"
gopractice-calc = "gopractice.calc:main"
gopractice-mplayer = "gopractice.mplayer:main"
gopractice-cgss = "gopractice.cgss:main"
gopractice-icmp = "gopractice.icmp:main"
gopractice-simplehttp = "gopractice.simplehttp:main"
gopractice-hash = "gopractice.hashing:main"
gopractice-primes = "gopractice.primes:main"
gopractice-echo = "gopractice.echo:main"
gopractice-photoweb = "gopractice.photoweb:main"

[tool.hatch.build.targets.wheel]
packages = ["gopractice"]

[tool.hatch.build.targets.sdist]
include = [
    "gopractice",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
