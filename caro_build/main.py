#!/usr/bin/env python3
"""
Main entry point for the caro build driver
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

from .builders import BuildOrchestrator
from .config import ConfigLoader
from .config.models import BuildOptions
from .exceptions import CaroBuildError, ConfigError, UsageError
from .platform import PlatformDetector
from .tools import ToolLocator
from .utils import CommandRunner, Logger


class BuildArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting with status 2"""
    
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class BuildSystem:
    """Main build driver class"""
    
    def __init__(self,
                 root_dir: Optional[Path] = None,
                 build_dir: Optional[Path] = None,
                 config_file: Optional[Path] = None,
                 verbose: bool = False,
                 dry_run: bool = False,
                 log_file: Optional[Path] = None,
                 logger: Optional[Logger] = None,
                 locator: Optional[ToolLocator] = None):
        """
        Initialize the build driver
        
        Args:
            root_dir: Project root directory
            build_dir: Build directory override
            config_file: Explicit configuration file
            verbose: Enable verbose output
            dry_run: Print commands without running them
            log_file: Optional log file path
            logger: Logger to use instead of creating one
            locator: Tool locator for clang-format and clang-tidy
        """
        self.root_dir = Path(root_dir or Path.cwd()).resolve()
        self.verbose = verbose
        self.dry_run = dry_run
        
        self.logger = logger or Logger(verbose=verbose, log_file=str(log_file) if log_file else None)
        
        self.platform_info = PlatformDetector().detect()
        self.logger.debug(f"Platform info: {self.platform_info}")
        
        self.config = ConfigLoader(self.root_dir, config_file=config_file)
        if self.config.config_file:
            self.logger.debug(f"Using config file: {self.config.config_file}")
        
        self.build_dir = self.config.get_build_dir(build_dir)
        
        self.runner = CommandRunner(self.logger, cwd=self.root_dir, dry_run=dry_run)
        
        self.orchestrator = BuildOrchestrator(
            config=self.config,
            build_dir=self.build_dir,
            runner=self.runner,
            logger=self.logger,
            locator=locator
        )
    
    def default_jobs(self) -> int:
        """Job count from CARO_BUILD_JOBS/MAX_JOBS, else the CPU count"""
        env_jobs = self.config.get_env_jobs(self.logger)
        if env_jobs:
            return env_jobs
        return self.platform_info["cpu_count"]
    
    def build(self, options: BuildOptions) -> bool:
        """
        Run a build
        
        Args:
            options: Parsed build options
            
        Returns:
            True if the build succeeded
        """
        if options.jobs is None:
            options = options.model_copy(update={"jobs": str(self.default_jobs())})
        return self.orchestrator.run(options)
    
    def get_info(self) -> Dict[str, Any]:
        info = self.orchestrator.get_build_info()
        info["platform"] = self.platform_info["platform"]
        info["jobs"] = self.default_jobs()
        return info
    
    def show_info(self) -> None:
        """Show build driver information"""
        from . import __version__
        
        info = self.get_info()
        print(f"\ncaro build driver v{__version__}")
        print(f"{'='*50}")
        print(f"Platform: {info['platform']}")
        print(f"Root Directory: {info['root_dir']}")
        print(f"Build Directory: {info['build_dir']}")
        print(f"Config File: {info['config_file'] or '(defaults)'}")
        print(f"Generator: {info['generator']}")
        print(f"Default Jobs: {info['jobs']}")
        print(f"clang-format: {info['clang_format'] or 'not found'}")
        print(f"clang-tidy: {info['clang_tidy'] or 'not found'}")


def create_parser() -> BuildArgumentParser:
    """Build the command-line parser"""
    parser = BuildArgumentParser(
        prog="caro-build",
        description="Configure and build caro with CMake and Ninja",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False,
        epilog="""
Examples:
  %(prog)s                          # Release build
  %(prog)s --clean --debug          # Fresh Debug build
  %(prog)s --format --lint          # Build with clang-format and clang-tidy checks
  %(prog)s --jobs 8                 # Build with 8 parallel jobs
        """
    )
    
    parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit"
    )
    
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Clean build directory before building"
    )
    
    parser.add_argument(
        "--debug",
        dest="build_type",
        action="store_const",
        const="Debug",
        default="Release",
        help="Build in Debug mode (default: Release)"
    )
    
    parser.add_argument(
        "--release",
        dest="build_type",
        action="store_const",
        const="Release",
        help="Build in Release mode"
    )
    
    parser.add_argument(
        "--format",
        dest="run_format",
        action="store_true",
        help="Run clang-format checks"
    )
    
    parser.add_argument(
        "--lint",
        dest="run_lint",
        action="store_true",
        help="Run clang-tidy checks"
    )
    
    parser.add_argument(
        "--jobs",
        metavar="N",
        help="Number of parallel jobs (default: auto)"
    )
    
    parser.add_argument(
        "--build-dir",
        type=Path,
        metavar="DIR",
        help="Build directory (default: build, or $CARO_BUILD_DIR)"
    )
    
    parser.add_argument(
        "--config",
        dest="config_file",
        type=Path,
        metavar="FILE",
        help="Configuration file (default: caro-build.yaml if present)"
    )
    
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print commands without running them"
    )
    
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="FILE",
        help="Also write a debug log to FILE"
    )
    
    parser.add_argument(
        "--info",
        dest="show_info",
        action="store_true",
        help="Show resolved paths and tools, then exit"
    )
    
    return parser


def _scan_arguments(parser: argparse.ArgumentParser, argv: List[str]) -> Optional[List[str]]:
    """
    Walk the arguments left to right, the way a shell option loop does
    
    Each value-taking option is joined with its value as OPT=VALUE, so a
    value that looks like a flag still reaches argparse as a value.
    
    Returns:
        Normalized arguments, or None if --help comes before anything unknown
        
    Raises:
        UsageError: On the first unknown option or stray positional
    """
    actions = parser._option_string_actions
    normalized = []
    args = iter(argv)
    for token in args:
        flag, has_value, _ = token.partition("=")
        action = actions.get(flag)
        if action is None:
            raise UsageError(f"Unknown option: {token}")
        if action.dest == "help":
            return None
        if action.nargs is None and not has_value:
            value = next(args, None)
            if value is not None:
                token = f"{flag}={value}"
        normalized.append(token)
    return normalized


def parse_options(argv: Optional[List[str]] = None) -> BuildOptions:
    """
    Parse command-line arguments into BuildOptions
    
    Args:
        argv: Arguments, defaults to sys.argv[1:]
        
    Raises:
        UsageError: On an unknown option or a missing value
        SystemExit: With status 0 after printing help
    """
    parser = create_parser()
    argv = _scan_arguments(parser, sys.argv[1:] if argv is None else list(argv))
    if argv is None:
        parser.print_help()
        parser.exit()
    args = parser.parse_args(argv)
    
    return BuildOptions(
        clean=args.clean,
        build_type=args.build_type,
        run_format=args.run_format,
        run_lint=args.run_lint,
        jobs=args.jobs,
        build_dir=args.build_dir,
        config_file=args.config_file,
        log_file=args.log_file,
        dry_run=args.dry_run,
        verbose=args.verbose,
        show_info=args.show_info
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface"""
    try:
        options = parse_options(argv)
    except UsageError as e:
        Logger().error(str(e))
        return e.exit_code
    except SystemExit as e:
        # --help
        return e.code if isinstance(e.code, int) else 0
    
    try:
        logger = Logger(verbose=options.verbose, log_file=str(options.log_file) if options.log_file else None)
    except ConfigError as e:
        Logger().error(str(e))
        return e.exit_code
    
    try:
        bs = BuildSystem(
            build_dir=options.build_dir,
            config_file=options.config_file,
            verbose=options.verbose,
            dry_run=options.dry_run,
            logger=logger
        )
        if options.show_info:
            bs.show_info()
            return 0
        
        success = bs.build(options)
        return 0 if success else 1
        
    except KeyboardInterrupt:
        print("\nBuild interrupted by user", file=sys.stderr)
        return 130
    except CaroBuildError as e:
        logger.error(str(e))
        return e.exit_code
    except Exception as e:
        logger.error(f"Build system error: {e}")
        if options.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
