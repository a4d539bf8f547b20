"""Settings for gitu."""

from .loader import load_settings, save_settings
from .schema import GituSettings

__all__ = ["GituSettings", "load_settings", "save_settings"]
