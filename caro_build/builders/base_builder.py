"""
Base builder class that all builders inherit from
"""

import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..config.models import BuildType
from ..utils.runner import CommandRunner


class BaseBuilder(ABC):
    """Abstract base class for all builders"""
    
    def __init__(self,
                 name: str,
                 root_dir: Path,
                 build_dir: Path,
                 runner: CommandRunner,
                 logger: Any):
        """
        Initialize base builder
        
        Args:
            name: Project name
            root_dir: Project root (source tree)
            build_dir: Build directory
            runner: Command runner
            logger: Logger instance
        """
        self.name = name
        self.root_dir = Path(root_dir)
        self.build_dir = Path(build_dir)
        self.runner = runner
        self.logger = logger
    
    @property
    def dry_run(self) -> bool:
        return self.runner.dry_run
    
    @abstractmethod
    def configure(self, build_type: BuildType) -> bool:
        """Configure the build"""
        pass
    
    @abstractmethod
    def build(self, jobs: str) -> bool:
        """Build the project"""
        pass
    
    def prepare(self) -> None:
        """Create the build directory"""
        if not self.dry_run:
            self.build_dir.mkdir(parents=True, exist_ok=True)
    
    def clean(self) -> bool:
        """Remove the build directory, succeeding if it does not exist"""
        self.logger.warning("Cleaning build directory...")
        
        if self.build_dir.exists():
            self.logger.debug(f"Removing {self.build_dir}")
            if not self.dry_run:
                if self.build_dir.is_dir() and not self.build_dir.is_symlink():
                    shutil.rmtree(self.build_dir)
                else:
                    self.build_dir.unlink()
        else:
            self.logger.debug(f"Build directory does not exist: {self.build_dir}")
        
        return True
