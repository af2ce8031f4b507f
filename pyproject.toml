[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hullserve"
version = "0.1.0"
description = "Convex hull area tools: a command-line calculator, an interactive shell, a random input generator and several TCP servers sharing one point graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["convex hull", "geometry", "monotone chain", "tcp server", "reactor", "proactor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hullserve-hull = "hullserve.hull_cli:main"
hullserve-generate = "hullserve.generate:main"
hullserve-interactive = "hullserve.interactive:main"
hullserve-select-server = "hullserve.select_server:main"
hullserve-reactor-server = "hullserve.reactor_server:main"
hullserve-threaded-server = "hullserve.threaded_server:main"
hullserve-proactor-server = "hullserve.proactor_server:main"
hullserve-graph-server = "hullserve.graph_server:main"
hullserve-monitor-server = "hullserve.monitor_server:main"

[tool.hatch.build.targets.wheel]
packages = ["hullserve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
