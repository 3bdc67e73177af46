"""
Locating versioned LLVM tools on PATH
"""

import shutil
from typing import Iterable, List, Optional

from ..exceptions import ToolNotFoundError


class ToolLocator:
    """Finds the newest available variant of a tool such as clang-format"""
    
    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: Search path, defaults to PATH
        """
        self.path = path
    
    @staticmethod
    def candidates(base: str, versions: Iterable[str]) -> List[str]:
        """Return names to try, versioned first, bare name last"""
        names = [f"{base}-{v}" for v in versions if str(v)]
        names.append(base)
        return names
    
    def detect(self, base: str, versions: Iterable[str]) -> Optional[str]:
        """
        Detect the first available variant of a tool
        
        Args:
            base: Tool base name
            versions: Version suffixes in preference order
            
        Returns:
            The command name that resolved, or None
        """
        for name in self.candidates(base, versions):
            if shutil.which(name, path=self.path):
                return name
        return None
    
    def require(self, base: str, versions: Iterable[str]) -> str:
        """Like detect, but raises ToolNotFoundError when nothing resolves"""
        name = self.detect(base, versions)
        if name is None:
            raise ToolNotFoundError(base)
        return name


__all__ = ["ToolLocator"]
