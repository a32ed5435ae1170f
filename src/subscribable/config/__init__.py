"""Settings for subscribable channels."""

from .settings import ChannelSettings, load_settings_from_env

__all__ = ["ChannelSettings", "load_settings_from_env"]
