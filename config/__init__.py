from config.schema import SessionConfig
from config.defaults import default_session_config
from config.manager import ConfigManager

__all__ = ["SessionConfig", "default_session_config", "ConfigManager"]
