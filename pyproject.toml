[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spantrees"
version = "0.1.0"
description = "Weighted undirected graphs with BFS, DFS, Dijkstra, Prim and Kruskal trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "spanning tree", "bfs", "dfs", "dijkstra", "prim", "kruskal", "union-find"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spantrees-demo = "spantrees.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["spantrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
