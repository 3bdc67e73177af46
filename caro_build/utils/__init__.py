"""
Utility modules for the build driver
"""

import copy
import sys
import logging
from typing import Optional

from ..exceptions import ConfigError
from .runner import CommandRunner
from .submodules import SubmoduleManager


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""
    
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[0;32m',   # Green
        'WARNING': '\033[1;33m',  # Yellow
        'ERROR': '\033[0;31m',  # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[92m',  # Bright Green
        'RESET': '\033[0m'
    }
    
    def __init__(self, *args, stream=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.stream = stream or sys.stdout
    
    def format(self, record):
        if getattr(record, 'raw', False):
            return record.getMessage()
        
        # Add color for terminal output
        if self.stream.isatty():
            # Handlers share records, so color a copy
            record = copy.copy(record)
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']
            
            record.levelname = f"{color}{record.levelname}{reset}"
            record.msg = f"{color}{record.getMessage()}{reset}"
            record.args = None
        
        return super().format(record)


class Logger:
    """Build driver logger"""
    
    SUCCESS = 25  # Between INFO and WARNING
    
    def __init__(self, verbose: bool = False, log_file: Optional[str] = None, stream=None):
        """
        Initialize logger
        
        Args:
            verbose: Enable verbose output
            log_file: Optional log file path
            stream: Console stream, defaults to stdout
        """
        self.verbose = verbose
        stream = stream or sys.stdout
        
        logging.addLevelName(self.SUCCESS, "SUCCESS")
        
        self.logger = logging.getLogger("caro_build")
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self.logger.propagate = False
        
        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        
        # Console handler
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        
        if verbose:
            fmt = "%(asctime)s [%(levelname)s] %(message)s"
        else:
            fmt = "[%(levelname)s] %(message)s"
        
        console_formatter = ColoredFormatter(fmt, datefmt="%H:%M:%S", stream=stream)
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)
        
        # File handler
        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError as e:
                raise ConfigError(f"Cannot open log file {log_file}: {e}") from e
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)
            # File always gets debug output
            self.logger.setLevel(logging.DEBUG)
    
    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)
    
    def info(self, msg: str):
        """Log info message"""
        self.logger.info(msg)
    
    def warning(self, msg: str):
        """Log warning message"""
        self.logger.warning(msg)
    
    def error(self, msg: str):
        """Log error message"""
        self.logger.error(msg)
    
    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)
    
    def raw(self, msg: str):
        """Log raw message without formatting"""
        record = self.logger.makeRecord(
            self.logger.name, logging.INFO, "", 0, msg, (), None
        )
        record.raw = True
        self.logger.handle(record)


__all__ = ["Logger", "ColoredFormatter", "CommandRunner", "SubmoduleManager"]
