"""
gitfixtures configuration management (YAML only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from gitfixtures.core.exceptions import ConfigError
from gitfixtures.core.utils.io import iter_yaml_files, read_yaml
from gitfixtures.core.utils.merge import deep_merge
from gitfixtures.core.utils.paths import get_project_config_dir, resolve_project_root
from gitfixtures.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "GITFIXTURES_"


class ConfigManager:
    """Load, merge, and validate gitfixtures configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: GITFIXTURES_<section>__<key>
    2. Project config: <project>/.gitfixtures/config/*.yaml (alphabetical order)
    3. Bundled defaults: gitfixtures.data/config/*.yaml (alphabetical order)

    Environment keys must use ``__`` between path segments so that keys
    containing underscores (``clone_depth``) survive. Variables without ``__``
    (such as ``GITFIXTURES_PROJECT_ROOT``) are not config overrides.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root else resolve_project_root()
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = get_project_config_dir(self.repo_root)
        self.schemas_dir = get_data_path("schemas")

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            try:
                data = read_yaml(path, default={}, raise_on_error=True) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(
                    f"Invalid YAML in {path}", context={"path": str(path), "error": str(exc)}
                ) from exc
            if not isinstance(data, dict):
                raise ConfigError(
                    f"Config file {path} must contain a mapping", context={"path": str(path)}
                )
            cfg = deep_merge(cfg, data)
        return cfg

    # ---- environment overrides -------------------------------------------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return s
        return s

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if "__" not in raw:
                continue
            segs = raw.split("__")
            if any(seg == "" for seg in segs):
                raise ConfigError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{key}'",
                    context={"key": key},
                )
            yield [seg.lower() for seg in segs], self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path, value in self._iter_env_overrides():
            logger.debug("Config override from environment: %s=%r", ".".join(path), value)
            self._set_nested(cfg, path, value)
        return cfg

    # ---- validation ------------------------------------------------------

    def load_schema(self) -> Dict[str, Any]:
        return read_yaml(self.schemas_dir / "config.schema.yaml", default={}, raise_on_error=True)

    def validate(self, cfg: Dict[str, Any]) -> None:
        validator = Draft202012Validator(self.load_schema())
        errors = sorted(validator.iter_errors(cfg), key=lambda e: list(e.path))
        if errors:
            details = [
                f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}" for err in errors
            ]
            raise ConfigError(
                "Configuration failed validation: " + "; ".join(details),
                context={"errors": details, "repo_root": str(self.repo_root)},
            )

    # ---- loading ---------------------------------------------------------

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load the merged configuration.

        Args:
            validate: Validate the merged result against the bundled schema.

        Raises:
            ConfigError: If a file is not valid YAML or the result fails validation.
        """
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        cfg = self.apply_env_overrides(cfg)
        if validate:
            self.validate(cfg)
        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX"]
