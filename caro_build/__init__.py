"""
caro build driver
Configures and builds the caro Vulkan application with CMake and Ninja,
with optional clang-format and clang-tidy checks
"""

__version__ = "1.0.0"

from .main import BuildSystem, main

__all__ = ["BuildSystem", "main", "__version__"]
