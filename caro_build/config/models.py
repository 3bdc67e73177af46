"""Contains models for the build configuration and CLI options"""

from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

BuildType = Literal["Debug", "Release"]
"""CMake build type"""

SubmodulePolicy = Literal["all_missing", "any_missing"]
"""When to run git submodule initialization"""


class ProjectSection(BaseModel):
    """Describes the project being built"""
    model_config = ConfigDict(extra="forbid")

    name: str = "caro"
    """Project name, used in log output"""
    executable: str = "caro"
    """Name of the executable produced in the build directory"""
    source_dir: str = "src"
    """Directory scanned by the format and lint checks"""


class BuildSection(BaseModel):
    """CMake configure and build settings"""
    model_config = ConfigDict(extra="forbid")

    build_dir: str = "build"
    """Build directory, relative to the project root"""
    generator: str = "Ninja"
    """CMake generator"""
    export_compile_commands: bool = True
    """Generate compile_commands.json and copy it to the project root"""
    cmake_args: List[str] = Field(default_factory=list)
    """Extra arguments appended to the configure command"""


class SubmoduleSection(BaseModel):
    """Git submodule bootstrap settings"""
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    """Run the submodule check at all"""
    sentinels: List[str] = Field(default_factory=lambda: [
        "external/Vulkan-Headers/CMakeLists.txt",
        "external/Vulkan-Hpp/CMakeLists.txt",
    ])
    """Files whose presence proves the submodules are checked out"""
    init_when: SubmodulePolicy = "all_missing"
    """Initialize when every sentinel is missing, or when any one is"""
    update_args: List[str] = Field(default_factory=lambda: [
        "submodule", "update", "--init", "--recursive",
    ])
    """Arguments passed to git"""


class CheckSection(BaseModel):
    """Settings for a source check tool (clang-format, clang-tidy)"""
    model_config = ConfigDict(extra="forbid")

    tool: str
    """Base executable name"""
    versions: List[str] = Field(default_factory=lambda: ["21", "19", "18"])
    """Version suffixes tried in order before the bare name"""
    patterns: List[str] = Field(default_factory=list)
    """Glob patterns matched recursively under the source directory"""
    args: List[str] = Field(default_factory=list)
    """Arguments placed before the file list"""
    max_files_per_invocation: int = Field(default=256, ge=1)
    """Upper bound on files passed to one tool process"""

    @field_validator("versions", mode="before")
    @classmethod
    def _stringify_versions(cls, value):
        """YAML reads bare version numbers as ints"""
        if isinstance(value, list):
            return [str(v) for v in value]
        return value


class BuildConfig(BaseModel):
    """Root model for the build configuration file"""
    model_config = ConfigDict(extra="forbid")

    project: ProjectSection = Field(default_factory=ProjectSection)
    build: BuildSection = Field(default_factory=BuildSection)
    submodules: SubmoduleSection = Field(default_factory=SubmoduleSection)
    format: CheckSection = Field(default_factory=lambda: CheckSection(
        tool="clang-format",
        patterns=["*.cpp", "*.h", "*.hpp"],
        args=["--dry-run", "--Werror"],
    ))
    lint: CheckSection = Field(default_factory=lambda: CheckSection(
        tool="clang-tidy",
        patterns=["*.cpp"],
        args=["--warnings-as-errors=*"],
    ))


class BuildOptions(BaseModel):
    """Options for one build run, populated from the command line"""
    model_config = ConfigDict(frozen=True)

    clean: bool = False
    """Remove the build directory before configuring"""
    build_type: BuildType = "Release"
    """CMake build type"""
    run_format: bool = False
    """Run clang-format in check mode before building"""
    run_lint: bool = False
    """Run clang-tidy after building"""
    jobs: Optional[str] = None
    """Parallel jobs passed through to the build tool unchecked, None picks a default"""
    build_dir: Optional[Path] = None
    """Overrides the configured build directory"""
    config_file: Optional[Path] = None
    """Explicit configuration file"""
    log_file: Optional[Path] = None
    """Also write debug logs to this file"""
    dry_run: bool = False
    """Print commands without running them"""
    verbose: bool = False
    """Enable debug output"""
    show_info: bool = False
    """Print resolved paths and tools instead of building"""

    @field_validator("jobs", mode="before")
    @classmethod
    def _stringify_jobs(cls, value):
        if isinstance(value, int):
            return str(value)
        return value
