"""
clang-format check
"""

from pathlib import Path
from typing import List

from .base_check import SourceCheck


class FormatCheck(SourceCheck):
    """Runs clang-format in dry-run mode so any diff fails the check"""
    
    label = "Format"
    
    def build_command(self, files: List[Path]) -> List[str]:
        return [self.tool, *self.config.args, *(str(f) for f in files)]
