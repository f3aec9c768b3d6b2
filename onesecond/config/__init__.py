from .loader import BenchConfig, ConfigError, load_config

__all__ = ["BenchConfig", "ConfigError", "load_config"]
