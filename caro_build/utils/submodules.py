"""
Git submodule bootstrap for vendored dependencies
"""

from pathlib import Path
from typing import Any, List

from ..config.models import SubmoduleSection
from .runner import CommandRunner


class SubmoduleManager:
    """Initializes git submodules when their checkouts are missing"""
    
    def __init__(self, root_dir: Path, config: SubmoduleSection, runner: CommandRunner, logger: Any):
        self.root_dir = Path(root_dir)
        self.config = config
        self.runner = runner
        self.logger = logger
    
    def missing_sentinels(self) -> List[Path]:
        """Return sentinel files that do not exist yet"""
        sentinels = [self.root_dir / s for s in self.config.sentinels]
        return [s for s in sentinels if not s.is_file()]
    
    def needs_init(self) -> bool:
        """
        Check whether the submodules need to be initialized
        
        Returns:
            True if the configured policy says the checkouts are missing
        """
        if not self.config.enabled or not self.config.sentinels:
            return False
        
        missing = self.missing_sentinels()
        if self.config.init_when == "any_missing":
            return bool(missing)
        return len(missing) == len(self.config.sentinels)
    
    def ensure(self) -> bool:
        """
        Initialize submodules if needed
        
        Returns:
            True if initialization ran
        """
        if not self.needs_init():
            missing = self.missing_sentinels() if self.config.enabled else []
            if missing:
                self.logger.warning(
                    f"Partial submodule checkout, missing: {', '.join(str(m) for m in missing)}"
                )
            else:
                self.logger.debug("Git submodules already present")
            return False
        
        self.logger.warning("Initializing git submodules...")
        self.runner.run(["git", *self.config.update_args], cwd=self.root_dir)
        return True
