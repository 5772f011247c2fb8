[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelterrain"
version = "0.1.0"
description = "Chunked voxel terrain: block storage, face-culled mesh generation, zone streaming and a first-person camera"
requires-python = ">=3.10"
keywords = ["voxel", "terrain", "chunk", "mesh", "camera", "3d"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelterrain = "voxelterrain.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelterrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
