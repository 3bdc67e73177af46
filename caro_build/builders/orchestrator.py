"""
Build orchestrator that runs the build steps in order
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ..checks import FormatCheck, LintCheck
from ..config import ConfigLoader
from ..config.models import BuildOptions
from ..tools import ToolLocator
from ..utils.runner import CommandRunner
from ..utils.submodules import SubmoduleManager
from .cmake_builder import CMakeBuilder


class BuildOrchestrator:
    """
    Orchestrates one build run
    
    Steps run in a fixed order: submodules, format check, clean, configure,
    build, compile database export, lint check. The first failure raises
    and stops the run.
    """
    
    def __init__(self,
                 config: ConfigLoader,
                 build_dir: Path,
                 runner: CommandRunner,
                 logger: Any,
                 locator: Optional[ToolLocator] = None):
        """
        Initialize build orchestrator
        
        Args:
            config: Configuration loader
            build_dir: Resolved build directory
            runner: Command runner
            logger: Logger instance
            locator: Tool locator for clang-format and clang-tidy
        """
        self.config = config
        self.root_dir = config.root_dir
        self.build_dir = Path(build_dir)
        self.runner = runner
        self.logger = logger
        self.locator = locator or ToolLocator()
        
        # Detect tools up front, report missing ones only when needed
        self.tools: Dict[str, Optional[str]] = {}
        for check in ("format", "lint"):
            check_config = config.get_check_config(check)
            self.tools[check] = self.locator.detect(check_config.tool, check_config.versions)
            self.logger.debug(f"{check_config.tool}: {self.tools[check] or 'not found'}")
        
        self.submodules = SubmoduleManager(self.root_dir, config.submodules, runner, logger)
    
    def get_builder(self) -> CMakeBuilder:
        return CMakeBuilder(
            name=self.config.project.name,
            root_dir=self.root_dir,
            build_dir=self.build_dir,
            build_config=self.config.build,
            runner=self.runner,
            logger=self.logger
        )
    
    def get_format_check(self) -> FormatCheck:
        return FormatCheck(
            config=self.config.get_check_config("format"),
            tool=self.tools["format"],
            root_dir=self.root_dir,
            source_dir=self.config.get_source_dir(),
            runner=self.runner,
            logger=self.logger
        )
    
    def get_lint_check(self) -> LintCheck:
        return LintCheck(
            config=self.config.get_check_config("lint"),
            tool=self.tools["lint"],
            root_dir=self.root_dir,
            source_dir=self.config.get_source_dir(),
            build_dir=self.build_dir,
            runner=self.runner,
            logger=self.logger
        )
    
    @property
    def executable_path(self) -> Path:
        return self.build_dir / self.config.project.executable
    
    def run(self, options: BuildOptions) -> bool:
        """
        Run a full build
        
        Args:
            options: Options parsed from the command line
            
        Returns:
            True if the build succeeded
        """
        self.submodules.ensure()
        
        if options.run_format:
            self.get_format_check().run()
        
        builder = self.get_builder()
        
        if options.clean:
            builder.clean()
        
        builder.prepare()
        
        if not builder.configure(options.build_type):
            return False
        
        if not builder.build(options.jobs):
            return False
        
        if self.config.build.export_compile_commands:
            builder.export_compile_commands()
        
        if options.run_lint:
            self.get_lint_check().run()
        
        self.logger.success("Build complete!")
        try:
            shown = self.executable_path.relative_to(self.root_dir)
        except ValueError:
            shown = self.executable_path
        self.logger.raw(f"Executable: {shown}")
        
        if not options.dry_run and not self.executable_path.exists():
            self.logger.warning(f"Expected executable not found: {self.executable_path}")
        
        return True
    
    def get_build_info(self) -> Dict[str, Any]:
        """
        Get build information
        
        Returns:
            Dictionary with resolved paths and tools
        """
        return {
            "name": self.config.project.name,
            "root_dir": str(self.root_dir),
            "build_dir": str(self.build_dir),
            "source_dir": str(self.config.get_source_dir()),
            "executable": str(self.executable_path),
            "generator": self.config.build.generator,
            "config_file": str(self.config.config_file) if self.config.config_file else None,
            "clang_format": self.tools["format"],
            "clang_tidy": self.tools["lint"],
        }
