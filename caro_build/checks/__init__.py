"""
Source checks run before and after the build
"""

from .base_check import SourceCheck
from .format_check import FormatCheck
from .lint_check import LintCheck

__all__ = ["SourceCheck", "FormatCheck", "LintCheck"]
