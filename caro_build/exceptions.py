"""
Exceptions raised by the build driver
"""

from typing import List, Optional, Sequence


class CaroBuildError(RuntimeError):
    """Base exception for build driver errors"""

    exit_code: int = 1


class UsageError(CaroBuildError):
    """Raised when the command line cannot be understood"""


class ConfigError(CaroBuildError):
    """Raised when the build configuration is missing or invalid"""


class ToolNotFoundError(CaroBuildError):
    """Raised when a required external tool is not on PATH"""

    def __init__(self, tool: str, message: Optional[str] = None):
        self.tool = tool
        super().__init__(message or f"Error: {tool} not found")


class CommandFailedError(CaroBuildError):
    """Raised when an external command exits with a non-zero status"""

    def __init__(self, cmd: Sequence[str], returncode: int):
        self.cmd: List[str] = [str(c) for c in cmd]
        self.returncode = returncode
        # Signals come back as negative return codes
        self.exit_code = returncode if 0 < returncode < 256 else 1
        super().__init__(f"Command failed with exit code {returncode}: {' '.join(self.cmd)}")


__all__ = [
    "CaroBuildError",
    "UsageError",
    "ConfigError",
    "ToolNotFoundError",
    "CommandFailedError",
]
