from .config import Config, Settings, load_settings
from .logger import get_logger

__all__ = ["Config", "Settings", "get_logger", "load_settings"]
