"""
clang-tidy check
"""

from pathlib import Path
from typing import Any, List, Optional

from ..config.models import CheckSection
from ..utils.runner import CommandRunner
from .base_check import SourceCheck


class LintCheck(SourceCheck):
    """Runs clang-tidy against the compile database in the build directory"""
    
    label = "Lint"
    
    def __init__(self,
                 config: CheckSection,
                 tool: Optional[str],
                 root_dir: Path,
                 source_dir: Path,
                 build_dir: Path,
                 runner: CommandRunner,
                 logger: Any):
        super().__init__(config, tool, root_dir, source_dir, runner, logger)
        self.build_dir = Path(build_dir)
    
    def build_command(self, files: List[Path]) -> List[str]:
        return [self.tool, "-p", str(self.build_dir), *self.config.args, *(str(f) for f in files)]
