"""
Builder components
"""

from .base_builder import BaseBuilder
from .cmake_builder import CMakeBuilder
from .orchestrator import BuildOrchestrator

__all__ = [
    "BaseBuilder",
    "CMakeBuilder",
    "BuildOrchestrator"
]
