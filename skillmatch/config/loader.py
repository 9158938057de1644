"""
Layered configuration loading.

Precedence, lowest first: built-in defaults, ``~/.skillmatch/config.yaml``,
``./skillmatch.yaml``, an explicit file, then ``SKM_`` environment
variables (``SKM_LATENCY__MATCH=0`` sets ``latency.match``).
"""
from __future__ import annotations
import json
import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from jsonschema import validate as js_validate, ValidationError
from pydantic import ValidationError as PydValidationError

from skillmatch.config.models import AppConfig

ENV_PREFIX = 'SKM_'
USER_CONFIG_PATH = Path.home() / '.skillmatch' / 'config.yaml'
PROJECT_CONFIG_NAME = 'skillmatch.yaml'


class ConfigError(ValueError):
    """Configuration failed schema or model validation"""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def _merge(layers) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for layer in layers:
        for k, v in layer.items():
            if isinstance(v, dict) and isinstance(merged.get(k), dict):
                merged[k].update(v)
            elif isinstance(v, dict):
                merged[k] = dict(v)
            else:
                merged[k] = v
    return merged


def _apply_env(conf: Dict[str, Any], environ) -> None:
    for k, v in environ.items():
        if not k.startswith(ENV_PREFIX):
            continue
        path = k[len(ENV_PREFIX):].lower().split('__')
        cur = conf
        for seg in path[:-1]:
            cur = cur.setdefault(seg, {})
        # YAML scalars so "0.5", "false" and "null" keep their types
        cur[path[-1]] = yaml.safe_load(v) if v else v


def default_config() -> Dict[str, Any]:
    return AppConfig().model_dump()


def load_config(explicit: Optional[Path] = None, environ=None) -> Dict[str, Any]:
    """Merge every configuration layer into one plain dict"""
    if environ is None:
        load_dotenv()
        environ = os.environ
    layers = [
        default_config(),
        _load_yaml(USER_CONFIG_PATH),
        _load_yaml(Path(PROJECT_CONFIG_NAME)),
    ]
    if explicit:
        if not Path(explicit).exists():
            raise ConfigError(f"Config file not found: {explicit}")
        layers.append(_load_yaml(Path(explicit)))
    merged = _merge(layers)
    _apply_env(merged, environ)
    return merged


def load_schema() -> Dict[str, Any]:
    text = resources.files('skillmatch.config').joinpath('schema.json').read_text(encoding='utf-8')
    return json.loads(text)


def validate_config(conf: Dict[str, Any]) -> AppConfig:
    """JSON Schema check followed by the pydantic model"""
    try:
        js_validate(instance=conf, schema=load_schema())
    except ValidationError as e:
        location = '.'.join(str(p) for p in e.absolute_path) or '<root>'
        raise ConfigError(f"{location}: {e.message}") from e
    try:
        return AppConfig(**conf)
    except PydValidationError as e:
        raise ConfigError(f"Config validation failed: {e.errors()}") from e
