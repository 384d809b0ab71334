from .settings import ConfigError, Settings, load_settings, DEFAULT_CONFIG_PATH

__all__ = ["ConfigError", "Settings", "load_settings", "DEFAULT_CONFIG_PATH"]
