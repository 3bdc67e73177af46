"""
External command execution with logging and dry-run support
"""

import os
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import CommandFailedError, ToolNotFoundError


class CommandRunner:
    """Runs external commands on behalf of builders and checks"""
    
    def __init__(self,
                 logger: Any,
                 cwd: Optional[Path] = None,
                 env: Optional[Dict[str, str]] = None,
                 dry_run: bool = False):
        """
        Initialize command runner
        
        Args:
            logger: Logger instance
            cwd: Default working directory
            env: Environment variables (defaults to a copy of os.environ)
            dry_run: If True, log commands instead of running them
        """
        self.logger = logger
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.env = env if env is not None else os.environ.copy()
        self.dry_run = dry_run
    
    def run(self,
            cmd: List[str],
            cwd: Optional[Path] = None,
            check: bool = True,
            capture_output: bool = False) -> subprocess.CompletedProcess:
        """
        Run a command with logging
        
        Args:
            cmd: Command and arguments
            cwd: Working directory
            check: Raise CommandFailedError on non-zero exit
            capture_output: Capture stdout/stderr
            
        Returns:
            CompletedProcess instance
        """
        if cwd is None:
            cwd = self.cwd
        cmd = [str(c) for c in cmd]
        cmd_str = " ".join(cmd)
        
        if self.dry_run:
            self.logger.info(f"[DRY RUN] Would run: {cmd_str}")
            return subprocess.CompletedProcess(cmd, 0, "", "")
        
        self.logger.debug(f"Running: {cmd_str}")
        self.logger.debug(f"  in: {cwd}")
        
        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                env=self.env,
                check=check,
                capture_output=capture_output,
                text=True
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(cmd[0], f"Error: {cmd[0]} not found") from e
        except subprocess.CalledProcessError as e:
            self.logger.error(f"Command failed: {cmd_str}")
            if e.stdout:
                self.logger.error(f"stdout: {e.stdout}")
            if e.stderr:
                self.logger.error(f"stderr: {e.stderr}")
            raise CommandFailedError(cmd, e.returncode) from e
        
        if capture_output and result.stdout:
            self.logger.debug(f"Output: {result.stdout}")
        
        return result
