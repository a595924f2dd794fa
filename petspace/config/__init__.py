"""Configuration module for petspace."""

from petspace.config.loader import get_config_path, load_config, save_config
from petspace.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config", "save_config"]
