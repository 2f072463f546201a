"""Factory Method, Composite and Strategy pattern demonstrations."""

from .config import AppConfig, configure_logging, load_config_from_env
from .demo import run_demo

__all__ = ["AppConfig", "configure_logging", "load_config_from_env", "run_demo"]
