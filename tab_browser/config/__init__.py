from .model import AppConfig, CHART_TYPES
from .loader import load_app_config

__all__ = ["AppConfig", "CHART_TYPES", "load_app_config"]
