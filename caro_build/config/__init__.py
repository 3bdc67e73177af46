"""
Configuration management for the build driver
"""

import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import (
    BuildConfig,
    BuildOptions,
    BuildSection,
    BuildType,
    CheckSection,
    ProjectSection,
    SubmoduleSection,
)

PROJECT_CONFIG_NAME = "caro-build.yaml"
"""Per-project override file looked up at the project root"""

BUILD_DIR_ENV = "CARO_BUILD_DIR"
JOBS_ENV_VARS = ("CARO_BUILD_JOBS", "MAX_JOBS")


def _deep_merge_dict(base: Dict[str, Any], update: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in update.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge_dict(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads and manages build driver configuration"""
    
    def __init__(self, root_dir: Path, config_file: Optional[Path] = None, env: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration loader
        
        Args:
            root_dir: Project root directory
            config_file: Explicit configuration file, must exist if given
            env: Environment mapping (defaults to os.environ)
        """
        self.root_dir = Path(root_dir)
        self.env = os.environ if env is None else env
        
        raw = self._load_defaults()
        
        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.is_absolute():
                config_file = self.root_dir / config_file
            if not config_file.is_file():
                raise ConfigError(f"Config file not found: {config_file}")
            self.config_file: Optional[Path] = config_file
        else:
            project_file = self.root_dir / PROJECT_CONFIG_NAME
            self.config_file = project_file if project_file.is_file() else None
        
        if self.config_file is not None:
            raw = _deep_merge_dict(raw, self._read_yaml(self.config_file))
        
        try:
            self.config = BuildConfig.model_validate(raw)
        except ValidationError as exc:
            source = self.config_file or "defaults"
            raise ConfigError(f"Invalid build configuration in {source}: {exc}") from exc
    
    def _load_defaults(self) -> Dict[str, Any]:
        text = resources.files(__package__).joinpath("defaults.yaml").read_text(encoding="utf-8")
        return self._parse_yaml(text, "defaults.yaml")
    
    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
        return self._parse_yaml(text, str(path))
    
    @staticmethod
    def _parse_yaml(text: str, source: str) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {source}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config root in {source} must be a mapping")
        return data
    
    @property
    def project(self) -> ProjectSection:
        return self.config.project
    
    @property
    def build(self) -> BuildSection:
        return self.config.build
    
    @property
    def submodules(self) -> SubmoduleSection:
        return self.config.submodules
    
    def get_check_config(self, name: str) -> CheckSection:
        """
        Get configuration for a source check
        
        Args:
            name: Check name (format, lint)
            
        Returns:
            Check configuration
        """
        if name == "format":
            return self.config.format
        if name == "lint":
            return self.config.lint
        raise ValueError(f"Unknown check: {name}")
    
    def get_build_dir(self, override: Optional[Path] = None) -> Path:
        """
        Resolve the build directory
        
        The command line wins over CARO_BUILD_DIR, which wins over the
        config file.
        """
        build_dir = override or self.env.get(BUILD_DIR_ENV) or self.config.build.build_dir
        build_dir = Path(build_dir)
        if not build_dir.is_absolute():
            build_dir = self.root_dir / build_dir
        return build_dir
    
    def get_source_dir(self) -> Path:
        return self.root_dir / self.config.project.source_dir
    
    def get_env_jobs(self, logger: Any = None) -> Optional[int]:
        """
        Get a job count from the environment
        
        Returns:
            Positive job count, or None when no variable holds one
        """
        for var in JOBS_ENV_VARS:
            value = self.env.get(var)
            if not value:
                continue
            try:
                jobs = int(value)
            except ValueError:
                jobs = 0
            if jobs > 0:
                return jobs
            if logger is not None:
                logger.warning(f"Ignoring invalid parallel job count {var}={value!r}")
        return None
    
    def get_all_configs(self) -> Dict[str, Any]:
        """Get all configuration data"""
        return self.config.model_dump(mode="json")


__all__ = [
    "ConfigLoader",
    "BuildConfig",
    "BuildOptions",
    "BuildType",
    "CheckSection",
    "SubmoduleSection",
    "PROJECT_CONFIG_NAME",
]
