"""
Platform detection
"""

import os
import sys
import platform
import subprocess
from typing import Dict, Any

DEFAULT_CPU_COUNT = 4


class PlatformDetector:
    """Detects and provides information about the current platform"""
    
    def detect(self) -> Dict[str, Any]:
        """
        Detect current platform
        
        Returns:
            Dictionary with platform information
        """
        return {
            "os": platform.system(),
            "platform": self._get_platform_name(),
            "machine": platform.machine(),
            "python_version": platform.python_version(),
            "cpu_count": self.cpu_count(),
        }
    
    def _get_platform_name(self) -> str:
        """Get normalized platform name"""
        system = platform.system().lower()
        
        if system == "darwin":
            return "macos"
        return system
    
    def cpu_count(self) -> int:
        """
        Number of CPUs available to this process
        
        Tries the scheduler affinity mask first (what nproc reports), then
        the total CPU count, then sysctl on BSD-likes, then a fixed default.
        """
        if hasattr(os, "sched_getaffinity"):
            try:
                count = len(os.sched_getaffinity(0))
                if count > 0:
                    return count
            except OSError:
                pass
        
        count = os.cpu_count()
        if count:
            return count
        
        if sys.platform == "darwin" or "bsd" in sys.platform:
            try:
                result = subprocess.run(
                    ["sysctl", "-n", "hw.ncpu"],
                    capture_output=True,
                    text=True,
                    check=True
                )
                return int(result.stdout.strip())
            except (subprocess.CalledProcessError, FileNotFoundError, ValueError):
                pass
        
        return DEFAULT_CPU_COUNT


__all__ = ["PlatformDetector", "DEFAULT_CPU_COUNT"]
