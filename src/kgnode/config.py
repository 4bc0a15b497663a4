from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Type, TypeVar, Any, Dict, Iterable
from pydantic import BaseModel
from yaml import safe_load, YAMLError
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="KGConfig")

class KGConfig(BaseModel):
    """Base config for kg* packages to inherit from."""
    pass


HOME_CONFIG_DIR = Path("~/.kgconf/").expanduser()


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r") as f:
        data = safe_load(f)  # handles YAML merges/anchors too
    return data or {}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two dicts. Dicts merge recursively; for non-dicts (incl. lists),
    the override wins entirely.
    """
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class ConfigLoader:
    """
    Layered config loader with deep merging.

    Load order (low → high priority):
      1) base:   ~/.kgconf/{name}.yaml (or .yml)
      2) cwd:    ./{name}.yaml (or .yml)
      3) file:   explicit `path` if provided
      4) env:    YAML content from env var {NAME}_CONFIG, then {NAME}_{field}

    Later layers override earlier ones (deep merge).
    """
    def __init__(self, config_name: str):
        self.config_name = config_name or "kgnode"

    def _candidate_paths(self, path: Optional[str | Path]) -> Iterable[Path]:
        explicit = [Path(path)] if path else []

        # support both .yaml and .yml
        base = [
            HOME_CONFIG_DIR / f"{self.config_name}.yaml",
            HOME_CONFIG_DIR / f"{self.config_name}.yml",
        ]
        cwd = [
            Path.cwd() / f"{self.config_name}.yaml",
            Path.cwd() / f"{self.config_name}.yml",
        ]

        # merge order: base → cwd → explicit
        return base + cwd + explicit

    def load_config(self, config_class: Type[T], path: Optional[str | Path] = None) -> T:
        if path and not Path(path).exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        merged: Dict[str, Any] = {}
        for p in self._candidate_paths(path):
            d = _read_yaml(p)
            if d:
                logger.debug(f"Loaded config layer from {p}")
                merged = _deep_merge(merged, d)

        # Config-specific .env file, e.g. ./kgnode.env
        env_file = Path.cwd() / f"{self.config_name}.env"
        if env_file.exists():
            logger.debug(f"Loading config-specific .env from: {env_file}")
            load_dotenv(env_file, override=True)

        env_config: Dict[str, Any] = {}

        # A single {NAME}_CONFIG env var with YAML content
        env_var_name = f"{self.config_name.upper()}_CONFIG"
        env_content = os.environ.get(env_var_name)
        if env_content:
            try:
                d = safe_load(env_content)
            except YAMLError as e:
                raise ValueError(f"Failed to parse {env_var_name}: {e}")
            if isinstance(d, dict):
                env_config = d

        # Individual env vars for each field in the config class
        env_prefix = f"{self.config_name.upper()}_"
        for field_name in config_class.model_fields.keys():
            env_value = os.environ.get(env_prefix + field_name.upper())
            if env_value is not None:
                env_config[field_name] = env_value

        if env_config:
            merged = _deep_merge(merged, env_config)

        return config_class(**merged)


class KgNodeConfig(KGConfig):
    """
    The configuration for kgnode.
    """
    log_level: str = "INFO"
    log_file: Optional[str] = None
    ascii_only: bool = False
    repair_bracketed: bool = False


def load_config(path: Optional[str | Path] = None) -> KgNodeConfig:
    """
    Load the configuration for kgnode.
    """
    return ConfigLoader("kgnode").load_config(KgNodeConfig, path)
