"""Configuration module for darkcoin."""

from darkcoin.config.loader import load_config, save_config, get_config_path
from darkcoin.config.schema import Config, DashdConfig

__all__ = ["Config", "DashdConfig", "load_config", "save_config", "get_config_path"]
