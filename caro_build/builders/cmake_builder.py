"""
CMake builder implementation
"""

import shutil
from pathlib import Path
from typing import Any, List, Optional

from ..config.models import BuildSection, BuildType
from ..exceptions import ToolNotFoundError
from ..utils.runner import CommandRunner
from .base_builder import BaseBuilder

COMPILE_COMMANDS = "compile_commands.json"


class CMakeBuilder(BaseBuilder):
    """Builder for the CMake/Ninja project"""
    
    def __init__(self,
                 name: str,
                 root_dir: Path,
                 build_dir: Path,
                 build_config: BuildSection,
                 runner: CommandRunner,
                 logger: Any,
                 cmake: Optional[str] = None):
        super().__init__(name, root_dir, build_dir, runner, logger)
        self.build_config = build_config
        
        # Get CMake executable
        self.cmake = cmake or shutil.which("cmake")
        if not self.cmake:
            if not self.dry_run:
                raise ToolNotFoundError("cmake")
            self.cmake = "cmake"
    
    def configure_command(self, build_type: BuildType) -> List[str]:
        cmd = [
            self.cmake,
            "-S", str(self.root_dir),
            "-B", str(self.build_dir),
            f"-DCMAKE_BUILD_TYPE={build_type}",
        ]
        
        if self.build_config.export_compile_commands:
            cmd.append("-DCMAKE_EXPORT_COMPILE_COMMANDS=ON")
        
        if self.build_config.generator:
            cmd.extend(["-G", self.build_config.generator])
        
        cmd.extend(self.build_config.cmake_args)
        return cmd
    
    def configure(self, build_type: BuildType) -> bool:
        """Configure using CMake"""
        self.logger.info(f"Configuring with CMake ({build_type})...")
        return self.runner.run(self.configure_command(build_type), cwd=self.root_dir).returncode == 0
    
    def build_command(self, jobs: str) -> List[str]:
        return [
            self.cmake,
            "--build", str(self.build_dir),
            "--parallel", str(jobs),
        ]
    
    def build(self, jobs: str) -> bool:
        """Build using CMake"""
        self.logger.info(f"Building with {jobs} parallel jobs...")
        return self.runner.run(self.build_command(jobs), cwd=self.root_dir).returncode == 0
    
    def export_compile_commands(self) -> Optional[Path]:
        """
        Copy compile_commands.json to the project root for clangd
        
        Returns:
            Destination path, or None if there was nothing to copy
        """
        source = self.build_dir / COMPILE_COMMANDS
        if not source.is_file():
            self.logger.debug(f"No {COMPILE_COMMANDS} in {self.build_dir}")
            return None
        
        destination = self.root_dir / COMPILE_COMMANDS
        self.logger.debug(f"Copying {source} -> {destination}")
        if not self.dry_run:
            shutil.copyfile(source, destination)
        return destination
