"""Configuration loading and validation"""
from .models import (
    AppConfig,
    RemoteCfg,
    LatencyCfg,
    StorageCfg,
    MatchingCfg,
    ValidationCfg,
    LoggingCfg,
)
from .loader import ConfigError, load_config, validate_config, default_config, load_schema

__all__ = [
    'AppConfig',
    'RemoteCfg',
    'LatencyCfg',
    'StorageCfg',
    'MatchingCfg',
    'ValidationCfg',
    'LoggingCfg',
    'ConfigError',
    'load_config',
    'validate_config',
    'default_config',
    'load_schema',
]
