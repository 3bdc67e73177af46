"""
Base class for checks that run a tool over the project sources
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterator, List, Optional

from ..config.models import CheckSection
from ..exceptions import ToolNotFoundError
from ..utils.runner import CommandRunner


class SourceCheck(ABC):
    """Abstract base class for source checks"""
    
    label = "Source"
    
    def __init__(self,
                 config: CheckSection,
                 tool: Optional[str],
                 root_dir: Path,
                 source_dir: Path,
                 runner: CommandRunner,
                 logger: Any):
        """
        Initialize source check
        
        Args:
            config: Check configuration
            tool: Resolved tool command, None if it was not found
            root_dir: Project root, commands run from here
            source_dir: Directory searched for files
            runner: Command runner
            logger: Logger instance
        """
        self.config = config
        self.tool = tool
        self.root_dir = Path(root_dir)
        self.source_dir = Path(source_dir)
        self.runner = runner
        self.logger = logger
    
    def collect_files(self) -> List[Path]:
        """
        Find files matching the check patterns
        
        Returns:
            Sorted paths, relative to the project root where possible
        """
        if not self.source_dir.is_dir():
            self.logger.debug(f"Source directory not found: {self.source_dir}")
            return []
        
        found = set()
        for pattern in self.config.patterns:
            for path in self.source_dir.rglob(pattern):
                if path.is_file():
                    found.add(path)
        
        files = []
        for path in sorted(found):
            try:
                files.append(path.relative_to(self.root_dir))
            except ValueError:
                files.append(path)
        return files
    
    def batches(self, files: List[Path]) -> Iterator[List[Path]]:
        """Split files into chunks of at most max_files_per_invocation"""
        size = self.config.max_files_per_invocation
        for start in range(0, len(files), size):
            yield files[start:start + size]
    
    @abstractmethod
    def build_command(self, files: List[Path]) -> List[str]:
        """Build the tool command line for a batch of files"""
        pass
    
    def run(self) -> bool:
        """
        Run the check over all matching files
        
        Returns:
            True if the check passed. A failing batch raises
            CommandFailedError and later batches are not run.
        """
        if not self.tool:
            raise ToolNotFoundError(self.config.tool)
        
        self.logger.info(f"Running {self.tool} checks...")
        
        files = self.collect_files()
        if not files:
            self.logger.warning(f"No files matching {', '.join(self.config.patterns)} in {self.source_dir}")
            return True
        
        self.logger.debug(f"Checking {len(files)} files")
        for batch in self.batches(files):
            self.runner.run(self.build_command(batch), cwd=self.root_dir)
        
        self.logger.success(f"{self.label} check passed!")
        return True
